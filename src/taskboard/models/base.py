import secrets
import string
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def generate_id(length: int = 9) -> str:
    """Generate a random record id (lowercase letters + digits)."""
    alphabet = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordModel(BaseModel):
    """Base for wire records: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self, **kwargs) -> dict:
        return self.model_dump(mode="json", by_alias=True, **kwargs)


class UpdateModel(RecordModel):
    """Partial update payload. Only explicitly set fields are applied."""

    @model_validator(mode="after")
    def _ensure_payload_not_empty(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update.")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

    def to_wire(self, **kwargs) -> dict:
        return super().to_wire(exclude_unset=True, **kwargs)
