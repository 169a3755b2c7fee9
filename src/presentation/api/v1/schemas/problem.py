from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """RFC 7807 style error body"""

    type: str = Field(..., description="https://httpstatuses.com/{status}")
    title: str
    status: int
    detail: str | None = None


class HealthCheckEntry(BaseModel):
    name: str
    status: str
    duration: float = Field(..., description="Milliseconds")
    description: str | None = None
    exception: str | None = None


class HealthCheckResponse(BaseModel):
    status: str
    total_duration: float = Field(..., description="Milliseconds")
    checks: list[HealthCheckEntry] = Field(default_factory=list)
