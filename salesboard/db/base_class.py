from decimal import Decimal

from sqlalchemy import Numeric
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; every model names its own table."""

    type_annotation_map = {
        Decimal: Numeric(20, 2),
    }
