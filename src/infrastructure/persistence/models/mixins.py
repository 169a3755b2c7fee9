"""
SQLAlchemy mixins for common model patterns.

Timestamps come from the domain (the application clock), not from the
database server, so the mixin declares no server defaults.
"""
from datetime import datetime

from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from src.infrastructure.persistence.types import UtcDateTime


class TimestampMixin:
    """
    Mixin for timestamp tracking.

    Provides:
        - created_at: Set once by the aggregate factory
        - updated_at: Null until the first edit

    Usage:
        class MyModel(TimestampMixin, Base):
            __tablename__ = "my_model"
            # ... other columns
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(UtcDateTime(), nullable=False)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime | None]:
        return mapped_column(UtcDateTime(), nullable=True)
