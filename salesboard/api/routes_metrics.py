from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
def metrics_endpoint() -> Response:
    # Counters are incremented where reports are built; just expose the registry.
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
