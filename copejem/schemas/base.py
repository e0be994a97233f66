"""Record Base: shared pydantic configuration for every stored entity."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for Company, Member and Project records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        from_attributes=True,
        validate_default=True,
    )

    id: str = Field(max_length=36)

    @field_validator("*", mode="after")
    @classmethod
    def attach_utc(cls, v):
        """Backends without tz support hand back naive datetimes; those are UTC."""
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def to_slot(self) -> dict:
        """JSON-safe camelCase payload for the local slot store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SubRecord(BaseModel):
    """Nested value stored inside a record (task, sponsor, partner...)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )
