"""Handlers reacting to AuthorCreatedEvent"""

from src.domain.events import AuthorCreatedEvent
from src.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogAuthorCreatedHandler:
    async def handle(self, event: AuthorCreatedEvent) -> None:
        logger.info(
            "Author created: %s (%s) at %s",
            event.author_id,
            event.full_name,
            event.occurred_on.isoformat(),
        )
