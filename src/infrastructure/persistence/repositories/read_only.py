"""
Read-only repositories for the query side.

They select plain columns and return read models, so queries never load
or track aggregates.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories import AuthorReadDto, PostReadDto
from src.infrastructure.persistence.models.author import AuthorModel
from src.infrastructure.persistence.models.post import PostModel
from src.shared.telemetry.tracing import traced


class PostReadOnlyRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    @traced("post_read_repository.get_by_id", attributes={"db.table": "posts"})
    async def get_by_id(self, id: UUID) -> PostReadDto | None:
        result = await self.db.execute(
            select(
                PostModel.id,
                PostModel.author_id,
                PostModel.title,
                PostModel.description,
                PostModel.content,
                PostModel.created_at,
                PostModel.updated_at,
            ).where(PostModel.id == id)
        )
        row = result.one_or_none()
        if row is None:
            return None

        return PostReadDto(
            id=row.id.value,
            author_id=row.author_id.value,
            title=row.title.value,
            description=row.description.value,
            content=row.content.value,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


class AuthorReadOnlyRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    @traced("author_read_repository.get_by_id", attributes={"db.table": "authors"})
    async def get_by_id(self, id: UUID) -> AuthorReadDto | None:
        result = await self.db.execute(
            select(AuthorModel.id, AuthorModel.name, AuthorModel.surname).where(
                AuthorModel.id == id
            )
        )
        row = result.one_or_none()
        if row is None:
            return None
        return AuthorReadDto(id=row.id.value, name=row.name, surname=row.surname)
