from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


# Largest value a signed 64-bit INTEGER column can hold
MAX_INTEGER = 2**63 - 1


def utcnow() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class with a storage-assigned numeric identifier.

    Entities are detached copies of persisted rows. Attributes are exposed in
    snake_case to Python code and in camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier assigned by storage on create",
    )

    created_at: datetime | None = PydanticField(default=None)
    updated_at: datetime | None = PydanticField(default=None)

    def to_dict(self) -> dict:
        """Serialize to a JSON-ready mapping with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class EntityTable(SQLModel, table=False):
    """Base table class with an autoincrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the row",
    )

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
