"""Domain entities."""

from src.domain.entities.author import Author
from src.domain.entities.base import AggregateRoot, Entity
from src.domain.entities.post import Post

__all__ = [
    "Entity",
    "AggregateRoot",
    "Author",
    "Post",
]
