from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    author_id: UUID
    title: str = Field(..., max_length=200)
    description: str = Field(..., max_length=500)
    content: str = Field(..., max_length=50000)


class CreatePostResponse(BaseModel):
    id: UUID
    author_id: UUID
    title: str
    description: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None


class AuthorResponse(BaseModel):
    id: UUID
    name: str
    surname: str


class GetPostResponse(CreatePostResponse):
    author: AuthorResponse | None = None
