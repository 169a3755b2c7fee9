"""Development seed data"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Author
from src.domain.value_objects import AuthorId
from src.infrastructure.persistence.repositories.author_repo import AuthorRepository
from src.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

SEED_CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)

SEED_AUTHORS: tuple[tuple[UUID, str, str], ...] = (
    (UUID("00000000-0000-0000-0000-000000000001"), "Albert", "Blanco"),
    (UUID("00000000-0000-0000-0000-000000000002"), "Test", "Two"),
    (UUID("00000000-0000-0000-0000-000000000003"), "TestData", "Three"),
)


async def seed_authors(db: AsyncSession) -> int:
    """
    Insert the development authors that are missing.

    Safe to run on every startup. Returns the number of authors inserted.
    """
    repo = AuthorRepository(db)
    inserted = 0

    for author_id, name, surname in SEED_AUTHORS:
        if await repo.exists(AuthorId(author_id)):
            continue

        result = Author.create_with_id(author_id, name, surname, SEED_CREATED_AT)
        if result.is_failure:
            raise ValueError(f"Invalid seed author {author_id}: {result.error_message}")

        author = result.value
        # Seeding is not a business operation; nothing subscribes to these
        author.clear_domain_events()
        await repo.add(author)
        inserted += 1

    await db.commit()
    if inserted:
        logger.info("Seeded %d author(s)", inserted)
    return inserted
