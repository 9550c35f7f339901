"""Data-access layer for musics."""

from collections.abc import Iterable

from loguru import logger
from sqlmodel import Session, col, func, select

from src.music_api.entities.core._base import MAX_INTEGER, utcnow

from .entity import Music
from .table import MusicTable

# Fields a client may change through an update
_MUTABLE_FIELDS = (
    "title",
    "artist",
    "release_date",
    "duration",
    "number_views",
    "feat",
)


def _visible():
    """Predicate shared by every read path: deleted rows do not exist."""
    return col(MusicTable.deleted) == False  # noqa: E712


def _fits_integer_column(music_id: int) -> bool:
    """Ids outside the INTEGER column range cannot name any row."""
    return -MAX_INTEGER - 1 <= music_id <= MAX_INTEGER


class MusicRepository:
    """Data-access layer for musics.

    The repository flushes but never commits; the caller owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _get_visible_row(self, music_id: int) -> MusicTable | None:
        if not _fits_integer_column(music_id):
            return None
        statement = select(MusicTable).where(MusicTable.id == music_id, _visible())
        return self._session.exec(statement).first()

    def get(self, music_id: int) -> Music | None:
        row = self._get_visible_row(music_id)
        if row is None:
            return None
        return Music.model_validate(row, from_attributes=True)

    def get_including_deleted(self, music_id: int) -> Music | None:
        if not _fits_integer_column(music_id):
            return None
        row = self._session.get(MusicTable, music_id)
        if row is None:
            return None
        return Music.model_validate(row, from_attributes=True)

    def count(self) -> int:
        statement = select(func.count()).select_from(MusicTable).where(_visible())
        return self._session.exec(statement).one()

    def list_page(self, offset: int, limit: int) -> tuple[list[Music], int]:
        """Return one window of non-deleted musics ordered by id, plus the total."""
        statement = (
            select(MusicTable)
            .where(_visible())
            .order_by(col(MusicTable.id))
            .offset(offset)
            .limit(limit)
        )
        rows = self._session.exec(statement).all()
        musics = [Music.model_validate(row, from_attributes=True) for row in rows]
        return musics, self.count()

    def _to_row(self, music: Music) -> MusicTable:
        now = utcnow()
        return MusicTable(
            title=music.title,
            artist=music.artist,
            release_date=music.release_date,
            duration=music.duration,
            number_views=music.number_views,
            feat=music.feat,
            deleted=False,
            created_at=now,
            updated_at=now,
        )

    def create(self, music: Music) -> Music:
        row = self._to_row(music)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        logger.debug("Inserted music row", music_id=row.id)
        return Music.model_validate(row, from_attributes=True)

    def bulk_create(self, musics: Iterable[Music]) -> list[Music]:
        rows = [self._to_row(music) for music in musics]
        self._session.add_all(rows)
        self._session.flush()
        for row in rows:
            self._session.refresh(row)
        logger.debug("Inserted music rows", count=len(rows))
        return [Music.model_validate(row, from_attributes=True) for row in rows]

    def update(self, music_id: int, music: Music) -> int:
        """Copy the mutable fields of ``music`` onto the stored row.

        Returns the number of rows affected: 0 when the music does not exist
        or was logically deleted, 1 otherwise.
        """
        row = self._get_visible_row(music_id)
        if row is None:
            return 0

        for field_name in _MUTABLE_FIELDS:
            setattr(row, field_name, getattr(music, field_name))
        row.updated_at = utcnow()

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return 1

    def soft_delete(self, music_id: int) -> bool:
        row = self._get_visible_row(music_id)
        if row is None:
            return False

        row.deleted = True
        row.updated_at = utcnow()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return True
