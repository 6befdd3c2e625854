"""Shared base for immutable, always-validated records."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.errors import ValidationFailedError


class ValidatedModel(BaseModel):
    """Frozen pydantic model whose constructor always enforces field constraints.

    ``parse`` is the library-facing factory: it accepts a mapping (typically a
    decoded JSON body) and raises ``ValidationFailedError`` with one issue per
    offending field instead of pydantic's own exception type.

    Example:
        >>> from pydantic import Field
        >>> class Percent(ValidatedModel):
        ...     value: int = Field(ge=0, le=100)
        >>> Percent.parse({"value": 40}).value
        40
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def parse(cls, data: Any) -> Self:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValidationFailedError.from_pydantic(cls.__name__, e) from e
