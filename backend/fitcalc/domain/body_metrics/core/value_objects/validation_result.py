"""ValidationResult value object - advisory range-check report."""

from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    """
    Outcome of validating a (possibly partial) profile.

    Attributes:
        is_valid: True iff errors is empty
        errors: Messages that count against validity
        field_errors: Message per out-of-range field, including
            circumference errors that do not count against validity
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    field_errors: dict[str, str] = Field(default_factory=dict)

    def error_for(self, field: str) -> str | None:
        return self.field_errors.get(field)
