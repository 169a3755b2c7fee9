from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects import AuthorId, AuthorName
from src.infrastructure.persistence.database import Base
from src.infrastructure.persistence.models.mixins import TimestampMixin
from src.infrastructure.persistence.types import AuthorIdType


class AuthorModel(TimestampMixin, Base):
    """
    Author table.

    Inherits from TimestampMixin:
        - created_at: Creation timestamp
        - updated_at: Last update timestamp
    """

    __tablename__ = "authors"

    id: Mapped[AuthorId] = mapped_column(AuthorIdType(), primary_key=True)
    name: Mapped[str] = mapped_column(String(AuthorName.MAX_LENGTH), nullable=False)
    surname: Mapped[str] = mapped_column(String(AuthorName.MAX_LENGTH), nullable=False)
