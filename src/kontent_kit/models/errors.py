"""Error response body returned by the Management API."""

from pydantic import BaseModel, Field


class ValidationErrorDetail(BaseModel):
    """One field-level validation message."""

    message: str
    path: str | None = None
    line: int | None = None
    position: int | None = None

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class ErrorResponse(BaseModel):
    """Parsed error body.

    Example body:
        {"request_id": "...", "error_code": 5, "message": "The provided request body is invalid.",
         "validation_errors": [{"message": "...", "path": "codename"}]}
    """

    message: str = ""
    request_id: str | None = None
    error_code: int | None = None
    validation_errors: list[ValidationErrorDetail] = Field(default_factory=list)
