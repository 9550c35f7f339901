"""Unit tests for MusicService orchestration."""

from datetime import date, time

import pytest
from sqlmodel import Session

from src.music_api.core.errors import MusicNotFoundError, MusicValidationError
from src.music_api.core.services import MusicService, PageRequest
from src.music_api.entities.service.music import Music, MusicRepository


class TestMusicService:
    """Test MusicService against a real in-memory database."""

    @pytest.fixture
    def stored(self, session: Session, music_factory) -> list[Music]:
        musics = MusicRepository(session).bulk_create(music_factory.ten_first_musics())
        session.commit()
        return musics

    @pytest.fixture
    def service(self, session: Session) -> MusicService:
        return MusicService(session)

    def test_list_first_page(self, service: MusicService, stored: list[Music]):
        page = service.list_musics(PageRequest(page=0, size=5))

        assert len(page.content) == 5
        assert page.content[4].title == "Title 5"
        assert page.total_elements == 10
        assert page.total_pages == 2

    def test_list_second_page(self, service: MusicService, stored: list[Music]):
        page = service.list_musics(PageRequest(page=1, size=4))

        assert len(page.content) <= 4
        assert page.content[1].title == "Title 6"

    def test_get_music(self, service: MusicService, stored: list[Music]):
        assert service.get_music(stored[1].id).title == "Title 2"

    def test_get_missing_music(self, service: MusicService):
        with pytest.raises(MusicNotFoundError) as exc_info:
            service.get_music(1000)

        assert exc_info.value.message == "Music not found!"
        assert exc_info.value.music_id == 1000

    def test_create_validates_first(self, service: MusicService, session: Session):
        with pytest.raises(MusicValidationError, match="Artist is required!"):
            service.create_music(
                Music(title="T", release_date=date(2020, 1, 1), duration=time(0, 1))
            )

        assert MusicRepository(session).count() == 0

    def test_create_music(self, service: MusicService):
        created = service.create_music(
            Music(
                title="New",
                artist="Artist",
                release_date=date(2020, 1, 1),
                duration=time(0, 2, 30),
            )
        )

        assert created.id is not None
        assert service.get_music(created.id) == created

    def test_update_validates_before_existence(self, service: MusicService):
        """An invalid body is reported even for an unknown id."""
        with pytest.raises(MusicValidationError, match="Title is required!"):
            service.update_music(1000, Music(title=""))

    def test_update_missing_music(self, service: MusicService, stored: list[Music]):
        music = stored[0].model_copy()

        with pytest.raises(MusicNotFoundError):
            service.update_music(1000, music)

    def test_update_music(self, service: MusicService, stored: list[Music]):
        music = stored[9].model_copy()
        music.title = "Title 11"

        assert service.update_music(music.id, music) == [1]
        assert service.get_music(music.id).title == "Title 11"

    def test_delete_music(
        self, service: MusicService, stored: list[Music], session: Session
    ):
        service.delete_music(stored[0].id)

        with pytest.raises(MusicNotFoundError):
            service.get_music(stored[0].id)
        assert MusicRepository(session).get_including_deleted(stored[0].id).deleted

    def test_delete_twice(self, service: MusicService, stored: list[Music]):
        service.delete_music(stored[0].id)

        with pytest.raises(MusicNotFoundError):
            service.delete_music(stored[0].id)

    def test_deleted_music_cannot_be_updated(
        self, service: MusicService, stored: list[Music]
    ):
        service.delete_music(stored[2].id)

        with pytest.raises(MusicNotFoundError):
            service.update_music(stored[2].id, stored[2])
