"""Maps failed ApplicationResults to problem-details responses"""

from fastapi import status
from fastapi.responses import JSONResponse

from src.application.common.models import Error, ErrorType
from src.presentation.api.v1.schemas.problem import ProblemDetails

STATUS_BY_ERROR_TYPE: dict[ErrorType, int] = {
    ErrorType.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorType.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorType.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorType.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorType.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

TITLE_BY_ERROR_TYPE: dict[ErrorType, str] = {
    ErrorType.VALIDATION: "Validation Error",
    ErrorType.NOT_FOUND: "Not Found",
    ErrorType.CONFLICT: "Conflict",
    ErrorType.UNAUTHORIZED: "Unauthorized",
    ErrorType.FORBIDDEN: "Forbidden",
    ErrorType.INTERNAL: "Internal Server Error",
}


def problem_type(status_code: int) -> str:
    return f"https://httpstatuses.com/{status_code}"


def problem_response(
    status_code: int, title: str, detail: str | None, headers: dict[str, str] | None = None
) -> JSONResponse:
    problem = ProblemDetails(
        type=problem_type(status_code), title=title, status=status_code, detail=detail
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(),
        headers=headers,
        media_type="application/problem+json",
    )


def to_problem_response(error: Error) -> JSONResponse:
    status_code = STATUS_BY_ERROR_TYPE.get(error.type, status.HTTP_500_INTERNAL_SERVER_ERROR)
    title = TITLE_BY_ERROR_TYPE.get(error.type, "Error")
    return problem_response(status_code, title, error.message)
