"""Entity: Music."""

from datetime import date, time
from typing import Any

from pydantic import Field

from src.music_api.entities.core._base import Entity


class Music(Entity):
    """Music entity representing a track in the catalogue.

    Every field is optional at the type level: the entity never rejects a
    partial payload. Required-field checks live in
    ``src.music_api.core.services.music.validation`` and run before anything
    is persisted.
    """

    title: str | None = Field(default=None, description="Track title")
    artist: str | None = Field(default=None, description="Performing artist")
    release_date: date | None = Field(default=None, description="Release date")
    duration: time | None = Field(default=None, description="Track length, e.g. 00:06:44")
    number_views: int = Field(default=0, description="Play counter")
    feat: bool = Field(default=False, description="Whether the track is a featuring")
    deleted: bool = Field(default=False, description="Logical-delete flag")

    def is_deleted(self) -> bool:
        return self.deleted

    def __eq__(self, other: Any) -> bool:
        """Compare musics by business attributes, ignoring timestamps."""
        if not isinstance(other, Music):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.artist == other.artist
            and self.release_date == other.release_date
            and self.duration == other.duration
            and self.number_views == other.number_views
            and self.feat == other.feat
            and self.deleted == other.deleted
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.artist,
            self.release_date,
            self.duration,
            self.number_views,
            self.feat,
            self.deleted,
        ))
