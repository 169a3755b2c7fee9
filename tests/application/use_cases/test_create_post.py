"""Tests for the create post command"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest

from src.application.common.models import ErrorType
from src.application.use_cases.posts.create_post import (
    CreatePostCommand,
    CreatePostCommandHandler,
    CreatePostCommandValidator,
)
from src.domain.entities import Author, Post
from src.domain.events import PostCreatedEvent
from src.domain.value_objects import AuthorId

NOW = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)


class StubClock:
    utc_now = NOW


@pytest.fixture
def author() -> Author:
    return Author.create("Albert", "Blanco", NOW).value


@pytest.fixture
def post_repo():
    return AsyncMock()


@pytest.fixture
def author_repo(author):
    repo = AsyncMock()
    repo.get_by_id.return_value = author
    return repo


@pytest.fixture
def unit_of_work():
    uow = MagicMock()
    uow.save_changes = AsyncMock()
    return uow


@pytest.fixture
def handler(post_repo, author_repo, unit_of_work) -> CreatePostCommandHandler:
    return CreatePostCommandHandler(post_repo, author_repo, unit_of_work, StubClock())


def make_command(author_id: UUID | None, **overrides) -> CreatePostCommand:
    fields = {"title": "Title", "description": "Description", "content": "Content"}
    fields.update(overrides)
    return CreatePostCommand(author_id=author_id, **fields)


class TestCreatePostCommandHandler:
    @pytest.mark.asyncio
    async def test_creates_post_for_existing_author(
        self, handler, author, post_repo, unit_of_work
    ):
        """
        GIVEN an existing author and valid post data
        WHEN the command is handled
        THEN the post is added, tracked and saved, and the response mirrors it.
        """
        result = await handler.handle(make_command(author.id.value))

        assert result.is_success
        response = result.value
        assert response.author_id == author.id.value
        assert response.title == "Title"
        assert response.description == "Description"
        assert response.content == "Content"
        assert response.created_at == NOW
        assert response.updated_at is None

        post_repo.add.assert_awaited_once()
        added_post = post_repo.add.await_args.args[0]
        assert isinstance(added_post, Post)
        assert added_post.id.value == response.id
        assert isinstance(added_post.domain_events[0], PostCreatedEvent)
        unit_of_work.track.assert_called_once_with(added_post)
        unit_of_work.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_author_is_not_found(self, handler, author_repo, post_repo, unit_of_work):
        author_id = uuid4()
        author_repo.get_by_id.return_value = None

        result = await handler.handle(make_command(author_id))

        assert result.is_failure
        assert result.error.type == ErrorType.NOT_FOUND
        assert result.error.message == f"Author with ID '{author_id}' was not found."
        author_repo.get_by_id.assert_awaited_once_with(AuthorId(author_id))
        post_repo.add.assert_not_awaited()
        unit_of_work.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_author_id_is_validation_error(self, handler, author_repo):
        result = await handler.handle(make_command(UUID(int=0)))

        assert result.error.type == ErrorType.VALIDATION
        assert result.error.message == "Author ID cannot be empty."
        author_repo.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_domain_failure_is_propagated(self, handler, author, post_repo):
        result = await handler.handle(make_command(author.id.value, title="   "))

        assert result.error.type == ErrorType.VALIDATION
        assert result.error.message == "Post title cannot be empty or whitespace."
        post_repo.add.assert_not_awaited()


class TestCreatePostCommandValidator:
    def test_valid_command_has_no_failures(self):
        assert CreatePostCommandValidator().validate(make_command(uuid4())) == []

    def test_missing_fields(self):
        command = CreatePostCommand(author_id=None, title=None, description="  ", content="")

        failures = CreatePostCommandValidator().validate(command)

        assert failures == [
            "Author ID is required.",
            "Title is required.",
            "Description is required.",
            "Content is required.",
        ]

    def test_nil_author_id_is_required(self):
        failures = CreatePostCommandValidator().validate(make_command(UUID(int=0)))

        assert failures == ["Author ID is required."]

    @pytest.mark.parametrize(
        "field, label, max_length",
        [("title", "Title", 200), ("description", "Description", 500), ("content", "Content", 50000)],
    )
    def test_too_long_fields(self, field, label, max_length):
        command = make_command(uuid4(), **{field: "x" * (max_length + 1)})

        failures = CreatePostCommandValidator().validate(command)

        assert failures == [f"{label} cannot exceed {max_length} characters."]
