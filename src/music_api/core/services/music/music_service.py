"""Business operations behind the /musics resource."""

from loguru import logger
from sqlmodel import Session

from src.music_api.core.errors import MusicNotFoundError
from src.music_api.entities.service.music import Music, MusicRepository

from .pagination import MusicPage, PageRequest
from .validation import validate_music


class MusicService:
    """Orchestrates validation, persistence and response shaping for musics.

    Each instance serves a single request and commits the session after every
    successful mutation.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repository = MusicRepository(session)

    def list_musics(self, request: PageRequest) -> MusicPage:
        content, total = self._repository.list_page(request.offset, request.limit)
        logger.debug(
            "Listed musics",
            page=request.page,
            size=request.size,
            returned=len(content),
            total=total,
        )
        return MusicPage.build(request, content, total)

    def get_music(self, music_id: int) -> Music:
        music = self._repository.get(music_id)
        if music is None:
            raise MusicNotFoundError(music_id)
        return music

    def create_music(self, music: Music) -> Music:
        validate_music(music)
        created = self._repository.create(music)
        self._session.commit()
        logger.info("Music created", music_id=created.id)
        return created

    def update_music(self, music_id: int, music: Music) -> list[int]:
        """Validate then update; returns the affected-row count as ``[n]``."""
        validate_music(music)
        affected = self._repository.update(music_id, music)
        if affected == 0:
            raise MusicNotFoundError(music_id)
        self._session.commit()
        logger.info("Music updated", music_id=music_id)
        return [affected]

    def delete_music(self, music_id: int) -> None:
        if not self._repository.soft_delete(music_id):
            raise MusicNotFoundError(music_id)
        self._session.commit()
        logger.info("Music logically deleted", music_id=music_id)
