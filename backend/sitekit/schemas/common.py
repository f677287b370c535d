from pydantic import BaseModel, ConfigDict


class RequestModel(BaseModel):
    """Base for request bodies: unknown keys are rejected, enums kept as values."""

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=True,
        validate_default=True,
        str_strip_whitespace=True,
    )

    def changes(self) -> dict:
        """Only the fields the client actually sent (PATCH semantics)."""
        return self.model_dump(exclude_unset=True)
