"""
Application layer - Application Business Rules.

This layer contains application-specific business rules, including:
- Interfaces (ports) for infrastructure dependencies
- The mediator and its pipeline behaviors
- Commands, queries and domain event handlers
"""

from src.application.common import (
    ApplicationResult,
    Error,
    ErrorType,
    LoggingBehavior,
    Mediator,
    ValidationBehavior,
)
from src.application.interfaces import (
    IAuthorReadOnlyRepository,
    IAuthorRepository,
    IDateTime,
    IEventPublisher,
    IPostReadOnlyRepository,
    IPostRepository,
    IUnitOfWork,
)
from src.application.use_cases import (
    CreatePostCommand,
    CreatePostCommandHandler,
    GetPostByIdQuery,
    GetPostByIdQueryHandler,
)

__all__ = [
    # Interfaces
    "IPostRepository",
    "IAuthorRepository",
    "IPostReadOnlyRepository",
    "IAuthorReadOnlyRepository",
    "IDateTime",
    "IEventPublisher",
    "IUnitOfWork",
    # Mediator
    "Mediator",
    "ValidationBehavior",
    "LoggingBehavior",
    "ApplicationResult",
    "Error",
    "ErrorType",
    # Use Cases
    "CreatePostCommand",
    "CreatePostCommandHandler",
    "GetPostByIdQuery",
    "GetPostByIdQueryHandler",
]
