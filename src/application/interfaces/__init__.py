"""
Application layer interfaces (ports).

These protocols define the contracts between the application layer
and the infrastructure layer, following the Dependency Inversion Principle.
"""

from src.application.interfaces.repositories import (
    AuthorReadDto,
    IAuthorReadOnlyRepository,
    IAuthorRepository,
    IPostReadOnlyRepository,
    IPostRepository,
    PostReadDto,
)
from src.application.interfaces.services import IDateTime, IEventPublisher, IUnitOfWork

__all__ = [
    # Repository interfaces
    "IPostRepository",
    "IAuthorRepository",
    "IPostReadOnlyRepository",
    "IAuthorReadOnlyRepository",
    # Read models
    "PostReadDto",
    "AuthorReadDto",
    # Service interfaces
    "IDateTime",
    "IEventPublisher",
    "IUnitOfWork",
]
