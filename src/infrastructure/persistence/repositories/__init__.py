""" Repository module for the persistence layer. """

from src.infrastructure.persistence.repositories.author_repo import AuthorRepository
from src.infrastructure.persistence.repositories.base import BaseRepository
from src.infrastructure.persistence.repositories.post_repo import PostRepository
from src.infrastructure.persistence.repositories.read_only import (
    AuthorReadOnlyRepository,
    PostReadOnlyRepository,
)

__all__ = [
    "BaseRepository",
    "AuthorRepository",
    "PostRepository",
    "AuthorReadOnlyRepository",
    "PostReadOnlyRepository",
]
