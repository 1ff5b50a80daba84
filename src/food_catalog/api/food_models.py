"""Pydantic models for food request bodies."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FoodCreate(BaseModel):
    """Body of a create request; every field is required."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    category: str = Field(min_length=1)
    description: str = Field(min_length=1)


class FoodUpdate(BaseModel):
    """Body of an update request; only submitted fields are written."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    category: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)

    @field_validator("name", "price", "category", "description", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        """Submitted fields must carry a value; omit a field to keep it."""
        if value is None:
            raise ValueError("must not be null")
        return value

    def submitted_fields(self) -> dict[str, object]:
        """Return the fields present in the request."""
        return self.model_dump(exclude_unset=True)
