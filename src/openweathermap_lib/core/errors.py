"""Exception hierarchy for OpenWeatherMap lookups."""

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError


class OpenWeatherError(Exception):
    """Base exception for every failure raised by this library."""

    pass


class RequestFailedError(OpenWeatherError):
    """Raised when OpenWeatherMap answers with a non-success HTTP status.

    Example:
        >>> str(RequestFailedError(401))
        'API request failed with status: 401'
    """

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"API request failed with status: {status_code}")


class DecodeFailedError(OpenWeatherError):
    """Raised when a response body does not match the expected JSON shape."""

    def __init__(self, message: str, errors: tuple["FieldIssue", ...] = ()):
        self.errors = errors
        super().__init__(message)


class TransportFailedError(OpenWeatherError):
    """Raised when the network exchange itself did not complete (timeout, DNS, reset)."""

    pass


class RequestParseFailedError(OpenWeatherError):
    """Raised when a bridge request text is not the expected JSON object."""

    pass


@dataclass(frozen=True)
class FieldIssue:
    """One offending field reported by a validating constructor.

    Example:
        >>> str(FieldIssue(field="main.humidity", value=120, message="must be <= 100"))
        'main.humidity=120: must be <= 100'
    """

    field: str
    value: Any
    message: str

    def __str__(self) -> str:
        return f"{self.field}={self.value!r}: {self.message}"


class ValidationFailedError(OpenWeatherError, ValueError):
    """Raised when a record receives a value outside its declared domain.

    Carries the model name and one ``FieldIssue`` per offending field so that
    callers can match on ``issue.field`` instead of the message text.
    """

    def __init__(self, model: str, issues: tuple[FieldIssue, ...]):
        self.model = model
        self.issues = issues
        details = "; ".join(str(issue) for issue in issues)
        super().__init__(f"Invalid {model}: {details}")

    @classmethod
    def from_pydantic(cls, model: str, exc: ValidationError) -> "ValidationFailedError":
        """Convert a pydantic ``ValidationError`` into field issues.

        Example:
            >>> from pydantic import BaseModel, Field
            >>> class Pct(BaseModel):
            ...     value: int = Field(ge=0, le=100)
            >>> try:
            ...     Pct(value=101)
            ... except ValidationError as e:
            ...     ValidationFailedError.from_pydantic("Pct", e).issues[0].field
            'value'
        """
        issues = tuple(
            FieldIssue(
                field=".".join(str(part) for part in error["loc"]) or model,
                value=error.get("input"),
                message=error["msg"],
            )
            for error in exc.errors()
        )
        return cls(model, issues)
