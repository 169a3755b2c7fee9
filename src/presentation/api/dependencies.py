from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.common.behaviors import LoggingBehavior, ValidationBehavior
from src.application.common.mediator import Mediator
from src.application.interfaces.services import IDateTime
from src.application.use_cases.authors.event_handlers import LogAuthorCreatedHandler
from src.application.use_cases.posts.create_post import (
    CreatePostCommand,
    CreatePostCommandHandler,
    CreatePostCommandValidator,
)
from src.application.use_cases.posts.event_handlers import (
    AuditPostCreatedHandler,
    LogPostCreatedHandler,
    UpdateAuthorStatsHandler,
)
from src.application.use_cases.posts.get_post_by_id import (
    GetPostByIdQuery,
    GetPostByIdQueryHandler,
)
from src.domain.events import AuthorCreatedEvent, PostCreatedEvent
from src.infrastructure.persistence.database import get_db
from src.infrastructure.persistence.repositories import (
    AuthorReadOnlyRepository,
    AuthorRepository,
    PostReadOnlyRepository,
    PostRepository,
)
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from src.infrastructure.services.date_time import SystemDateTime

# Global service instances (singletons)
_clock: IDateTime = SystemDateTime()


def get_clock() -> IDateTime:
    """Clock dependency (singleton, overridable in tests)"""
    return _clock


def _build_mediator(db: AsyncSession, clock: IDateTime) -> Mediator:
    """
    Wire the mediator for one request.

    Repositories and the unit of work share the request's session; the
    mediator doubles as the unit of work's event publisher.
    """
    validation = ValidationBehavior({CreatePostCommand: [CreatePostCommandValidator()]})
    mediator = Mediator(behaviors=[validation, LoggingBehavior()])

    unit_of_work = SqlAlchemyUnitOfWork(db, publisher=mediator)

    # Commands and queries
    mediator.register(
        CreatePostCommand,
        CreatePostCommandHandler(
            post_repo=PostRepository(db),
            author_repo=AuthorRepository(db),
            unit_of_work=unit_of_work,
            clock=clock,
        ),
    )
    mediator.register(
        GetPostByIdQuery,
        GetPostByIdQueryHandler(
            post_reader=PostReadOnlyRepository(db),
            author_reader=AuthorReadOnlyRepository(db),
        ),
    )

    # Domain event handlers
    mediator.subscribe(PostCreatedEvent, LogPostCreatedHandler())
    mediator.subscribe(PostCreatedEvent, AuditPostCreatedHandler())
    mediator.subscribe(PostCreatedEvent, UpdateAuthorStatsHandler())
    mediator.subscribe(AuthorCreatedEvent, LogAuthorCreatedHandler())

    return mediator


async def get_mediator(
    db: Annotated[AsyncSession, Depends(get_db)],
    clock: Annotated[IDateTime, Depends(get_clock)],
) -> Mediator:
    """Mediator dependency (one per request, bound to the request's session)"""
    return _build_mediator(db, clock)
