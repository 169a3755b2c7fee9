from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Post
from src.domain.value_objects import PostId
from src.infrastructure.persistence.models.post import PostModel
from src.infrastructure.persistence.repositories.base import BaseRepository
from src.shared.telemetry.tracing import traced


class PostRepository(BaseRepository[Post, PostModel]):
    """Repository for the Post aggregate"""

    def __init__(self, db: AsyncSession):
        super().__init__(db, PostModel)

    @traced("post_repository.get_by_id", attributes={"db.table": "posts"})
    async def get_by_id(self, id: PostId) -> Post | None:
        return await super().get_by_id(id)

    @traced("post_repository.add", attributes={"db.table": "posts"})
    async def add(self, entity: Post) -> None:
        await super().add(entity)

    @traced("post_repository.update", attributes={"db.table": "posts"})
    async def update(self, entity: Post) -> None:
        await super().update(entity)

    @traced("post_repository.remove", attributes={"db.table": "posts"})
    async def remove(self, entity: Post) -> None:
        await super().remove(entity)

    @traced("post_repository.exists", attributes={"db.table": "posts"})
    async def exists(self, id: PostId) -> bool:
        return await super().exists(id)

    def _to_entity(self, row: PostModel) -> Post:
        # Columns are already validated value objects (see persistence.types)
        return Post(
            id=row.id,
            author_id=row.author_id,
            title=row.title,
            description=row.description,
            content=row.content,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_model(self, entity: Post) -> PostModel:
        return PostModel(
            id=entity.id,
            author_id=entity.author_id,
            title=entity.title,
            description=entity.description,
            content=entity.content,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _apply_changes(self, row: PostModel, entity: Post) -> None:
        row.title = entity.title
        row.description = entity.description
        row.content = entity.content
        row.updated_at = entity.updated_at
