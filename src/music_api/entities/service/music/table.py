"""Music database table model."""

from datetime import date, time

from sqlmodel import Field

from src.music_api.entities.core._base import EntityTable


class MusicTable(EntityTable, table=True):
    """Database persistence model for musics.

    This represents how the Music entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "musics"
    # Never hand out the id of a previously inserted row again
    __table_args__ = {"sqlite_autoincrement": True}

    title: str
    artist: str
    release_date: date
    duration: time
    number_views: int = Field(default=0, nullable=False)
    feat: bool = Field(default=False, nullable=False)
    deleted: bool = Field(default=False, nullable=False, index=True)
