"""Tests for the Post aggregate"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.domain.entities import Post
from src.domain.events import PostCreatedEvent
from src.domain.value_objects import EMPTY_ID, AuthorId, PostId

CREATED_AT = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def author_id() -> AuthorId:
    return AuthorId.new()


@pytest.fixture
def post(author_id) -> Post:
    return Post.create(author_id, "Title", "Description", "Content", CREATED_AT).value


class TestPostCreate:
    def test_create_valid_post(self, author_id):
        """
        GIVEN valid post data
        WHEN Post.create is called
        THEN the post holds the values, has a fresh id and no updated_at.
        """
        result = Post.create(author_id, "Title", "Description", "Content", CREATED_AT)

        assert result.is_success
        post = result.value
        assert isinstance(post.id, PostId)
        assert post.author_id == author_id
        assert post.title.value == "Title"
        assert post.description.value == "Description"
        assert post.content.value == "Content"
        assert post.created_at == CREATED_AT
        assert post.updated_at is None

    def test_create_queues_exactly_one_event(self, author_id):
        post = Post.create(author_id, "Title", "Description", "Content", CREATED_AT).value

        assert len(post.domain_events) == 1
        event = post.domain_events[0]
        assert isinstance(event, PostCreatedEvent)
        assert event.post_id == post.id
        assert event.author_id == author_id
        assert event.title == "Title"
        assert event.occurred_on == CREATED_AT
        assert event.event_type == "PostCreatedEvent"

    def test_clear_domain_events_empties_queue(self, post):
        post.clear_domain_events()

        assert post.domain_events == ()

    def test_missing_author_fails(self):
        result = Post.create(None, "Title", "Description", "Content", CREATED_AT)

        assert result.is_failure
        assert result.error_message == "Author ID cannot be null."

    def test_first_invalid_field_wins(self, author_id):
        """
        GIVEN an invalid title and an invalid content
        WHEN Post.create is called
        THEN only the title failure is reported.
        """
        result = Post.create(author_id, " ", "Description", "", CREATED_AT)

        assert result.error_message == "Post title cannot be empty or whitespace."

    def test_description_checked_before_content(self, author_id):
        result = Post.create(author_id, "Title", "d" * 501, "", CREATED_AT)

        assert result.error_message == "Post description cannot exceed 500 characters."

    def test_create_with_id_uses_given_id(self, author_id):
        post_id = uuid4()

        result = Post.create_with_id(post_id, author_id, "Title", "Description", "Content", CREATED_AT)

        assert result.value.id == PostId(post_id)
        assert len(result.value.domain_events) == 1

    def test_create_with_empty_id_fails(self, author_id):
        result = Post.create_with_id(EMPTY_ID, author_id, "Title", "Description", "Content", CREATED_AT)

        assert result.error_message == "Post ID cannot be empty."

    def test_posts_compare_by_identity(self, author_id):
        post_id = uuid4()
        first = Post.create_with_id(post_id, author_id, "A", "A", "A", CREATED_AT).value
        second = Post.create_with_id(post_id, author_id, "B", "B", "B", CREATED_AT).value

        assert first == second
        assert hash(first) == hash(second)
        assert first != Post.create(author_id, "A", "A", "A", CREATED_AT).value


class TestPostEdits:
    def test_update_content(self, post):
        updated_at = CREATED_AT + timedelta(hours=1)

        result = post.update_content("New content", updated_at)

        assert result.is_success
        assert post.content.value == "New content"
        assert post.updated_at == updated_at

    def test_update_content_failure_leaves_post_unchanged(self, post):
        result = post.update_content("   ", CREATED_AT + timedelta(hours=1))

        assert result.error_message == "Post content cannot be empty or whitespace."
        assert post.content.value == "Content"
        assert post.updated_at is None

    def test_update_title_and_description(self, post):
        updated_at = CREATED_AT + timedelta(days=1)

        result = post.update_title_and_description("New title", "New description", updated_at)

        assert result.is_success
        assert post.title.value == "New title"
        assert post.description.value == "New description"
        assert post.updated_at == updated_at

    def test_update_title_and_description_is_all_or_nothing(self, post):
        """
        GIVEN a valid new title and an invalid new description
        WHEN update_title_and_description is called
        THEN neither field changes.
        """
        result = post.update_title_and_description("New title", "", CREATED_AT)

        assert result.is_failure
        assert post.title.value == "Title"
        assert post.description.value == "Description"
        assert post.updated_at is None
