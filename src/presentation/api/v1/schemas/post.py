from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# Post Schemas
class CreatePostRequest(BaseModel):
    """
    Schema for creating a post.

    Fields are deliberately loose: presence and length rules are enforced
    by the command validator so failures come back as 400 problem details.
    """

    author_id: UUID | None = Field(None, description="Existing author identifier")
    title: str | None = Field(None, description="Post title (max 200 characters)")
    description: str | None = Field(None, description="Short description (max 500 characters)")
    content: str | None = Field(None, description="Post body (max 50000 characters)")


class PostResponse(BaseModel):
    """Schema for post response"""

    id: UUID
    author_id: UUID
    title: str
    description: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class AuthorSummaryResponse(BaseModel):
    """Schema for the author embedded with ?include=author"""

    id: UUID
    name: str
    surname: str

    model_config = ConfigDict(from_attributes=True)


class GetPostResponse(PostResponse):
    """Schema for a single post, optionally with its author"""

    author: AuthorSummaryResponse | None = None
