"""
Author domain entity.

This represents the business concept of an author, independent of
how it's stored in the database.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.base import AggregateRoot
from src.domain.events import AuthorCreatedEvent
from src.domain.result import DomainResult
from src.domain.value_objects.core import AuthorId, AuthorName


@dataclass(eq=False)
class Author(AggregateRoot):
    """
    Aggregate root for blog authors.

    name and surname are always a valid AuthorName pair; they are only
    assigned after AuthorName.create succeeds.
    """

    id: AuthorId
    name: str
    surname: str
    created_at: datetime

    @classmethod
    def create(cls, name: str, surname: str, created_at: datetime) -> DomainResult["Author"]:
        """Create a new author with a freshly generated identifier"""
        return cls._build(AuthorId.new(), name, surname, created_at)

    @classmethod
    def create_with_id(
        cls, id: UUID, name: str, surname: str, created_at: datetime
    ) -> DomainResult["Author"]:
        """Create an author with a known identifier (e.g. seed data)"""
        name_result = AuthorName.create(name, surname)
        if name_result.is_failure:
            return DomainResult.failure(name_result.error_message)

        id_result = AuthorId.create(id)
        if id_result.is_failure:
            return DomainResult.failure(id_result.error_message)

        return cls._build(id_result.value, name, surname, created_at)

    @classmethod
    def _build(
        cls, author_id: AuthorId, name: str, surname: str, created_at: datetime
    ) -> DomainResult["Author"]:
        name_result = AuthorName.create(name, surname)
        if name_result.is_failure:
            return DomainResult.failure(name_result.error_message)

        author_name = name_result.value
        author = cls(
            id=author_id,
            name=author_name.first_name,
            surname=author_name.last_name,
            created_at=created_at,
        )
        author.raise_domain_event(
            AuthorCreatedEvent(
                occurred_on=created_at,
                author_id=author_id,
                full_name=author_name.full_name,
            )
        )
        return DomainResult.success(author)

    def update_name(self, name: str, surname: str) -> DomainResult[None]:
        """Rename the author. Leaves the entity unchanged on failure."""
        name_result = AuthorName.create(name, surname)
        if name_result.is_failure:
            return DomainResult.failure(name_result.error_message)

        self.name = name_result.value.first_name
        self.surname = name_result.value.last_name
        return DomainResult.success()

    @property
    def author_name(self) -> AuthorName:
        return AuthorName(self.name, self.surname)

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"
