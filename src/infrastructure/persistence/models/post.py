from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects import (
    AuthorId,
    PostContent,
    PostDescription,
    PostId,
    PostTitle,
)
from src.infrastructure.persistence.database import Base
from src.infrastructure.persistence.models.mixins import TimestampMixin
from src.infrastructure.persistence.types import (
    AuthorIdType,
    PostContentType,
    PostDescriptionType,
    PostIdType,
    PostTitleType,
)


class PostModel(TimestampMixin, Base):
    """
    Post table.

    Every value-object column is rebuilt through its factory on load.
    """

    __tablename__ = "posts"

    id: Mapped[PostId] = mapped_column(PostIdType(), primary_key=True)
    author_id: Mapped[AuthorId] = mapped_column(
        AuthorIdType(), ForeignKey("authors.id", ondelete="RESTRICT"), nullable=False
    )
    title: Mapped[PostTitle] = mapped_column(PostTitleType(), nullable=False)
    description: Mapped[PostDescription] = mapped_column(PostDescriptionType(), nullable=False)
    content: Mapped[PostContent] = mapped_column(PostContentType(), nullable=False)

    __table_args__ = (
        Index("idx_posts_author_id", "author_id"),
        Index("idx_posts_created_at", "created_at"),
    )
