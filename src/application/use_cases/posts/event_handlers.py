"""Handlers reacting to PostCreatedEvent once the post has been committed"""

from src.domain.events import PostCreatedEvent
from src.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogPostCreatedHandler:
    async def handle(self, event: PostCreatedEvent) -> None:
        logger.info(
            "Post created: %s '%s' by author %s at %s",
            event.post_id,
            event.title,
            event.author_id,
            event.occurred_on.isoformat(),
        )


class AuditPostCreatedHandler:
    """Writes an audit trail entry for every new post"""

    def __init__(self, audit_logger_name: str = "blog.audit") -> None:
        self.audit_logger = get_logger(audit_logger_name)

    async def handle(self, event: PostCreatedEvent) -> None:
        self.audit_logger.info(
            "AUDIT post_created post_id=%s author_id=%s occurred_on=%s",
            event.post_id,
            event.author_id,
            event.occurred_on.isoformat(),
        )


class UpdateAuthorStatsHandler:
    # TODO: persist a post count per author once author statistics get a table
    async def handle(self, event: PostCreatedEvent) -> None:
        logger.info("Updating post statistics for author %s", event.author_id)
