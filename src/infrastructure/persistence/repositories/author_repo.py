from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Author
from src.domain.value_objects import AuthorId, AuthorName
from src.infrastructure.exceptions import DataIntegrityError
from src.infrastructure.persistence.models.author import AuthorModel
from src.infrastructure.persistence.repositories.base import BaseRepository
from src.shared.telemetry.tracing import traced


class AuthorRepository(BaseRepository[Author, AuthorModel]):
    """Repository for the Author aggregate"""

    def __init__(self, db: AsyncSession):
        super().__init__(db, AuthorModel)

    @traced("author_repository.get_by_id", attributes={"db.table": "authors"})
    async def get_by_id(self, id: AuthorId) -> Author | None:
        return await super().get_by_id(id)

    @traced("author_repository.add", attributes={"db.table": "authors"})
    async def add(self, entity: Author) -> None:
        await super().add(entity)

    @traced("author_repository.update", attributes={"db.table": "authors"})
    async def update(self, entity: Author) -> None:
        await super().update(entity)

    @traced("author_repository.remove", attributes={"db.table": "authors"})
    async def remove(self, entity: Author) -> None:
        await super().remove(entity)

    @traced("author_repository.exists", attributes={"db.table": "authors"})
    async def exists(self, id: AuthorId) -> bool:
        return await super().exists(id)

    def _to_entity(self, row: AuthorModel) -> Author:
        # name and surname are plain columns, so validate them as a pair here
        name_result = AuthorName.create(row.name, row.surname)
        if name_result.is_failure:
            raise DataIntegrityError(
                "AuthorName", (row.name, row.surname), name_result.error_message
            )
        return Author(
            id=row.id,
            name=name_result.value.first_name,
            surname=name_result.value.last_name,
            created_at=row.created_at,
        )

    def _to_model(self, entity: Author) -> AuthorModel:
        return AuthorModel(
            id=entity.id,
            name=entity.name,
            surname=entity.surname,
            created_at=entity.created_at,
        )

    def _apply_changes(self, row: AuthorModel, entity: Author) -> None:
        row.name = entity.name
        row.surname = entity.surname
