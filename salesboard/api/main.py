import logging

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from salesboard.api.routes_dashboard import router as dashboard_router
from salesboard.api.routes_department import router as department_router
from salesboard.api.routes_expense import router as expense_router
from salesboard.api.routes_health import router as health_router
from salesboard.api.routes_metrics import router as metrics_router
from salesboard.api.routes_noi import router as noi_router
from salesboard.api.routes_projection import router as projection_router
from salesboard.api.routes_sales import router as sales_router
from salesboard.api.routes_target import router as target_router
from salesboard.core.config import settings
from salesboard.core.errors import register_error_handlers
from salesboard.core.logger import init_logging
from salesboard.core.monitoring import init_monitoring

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    init_logging()
    init_monitoring()

    is_production = settings.ENV.lower() == "prod"
    app = FastAPI(
        title=settings.APP_NAME,
        debug=False,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )
    register_error_handlers(app)
    app.include_router(dashboard_router)
    # Record keeping
    app.include_router(sales_router)
    app.include_router(expense_router)
    app.include_router(department_router)
    app.include_router(target_router)
    app.include_router(projection_router)
    app.include_router(noi_router)
    app.include_router(metrics_router, tags=["metrics"])
    app.include_router(health_router)
    logger.info("%s started env=%s", settings.APP_NAME, settings.ENV)
    return app


app = create_app()
