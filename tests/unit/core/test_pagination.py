"""Unit tests for page/size resolution and page responses."""

import pytest
from pydantic import ValidationError

from src.music_api.core.services import MusicPage, PageRequest
from src.music_api.entities.service.music import Music
from src.music_api.runtime.config.config_data import ConfigData, PaginationConfig
from src.music_api.runtime.context import with_context


class TestPageRequest:
    """Test PageRequest.from_query defaults and offset arithmetic."""

    def test_defaults_when_absent(self):
        request = PageRequest.from_query(config=PaginationConfig())

        assert request.page == 0
        assert request.size == 5
        assert request.offset == 0
        assert request.limit == 5

    def test_zero_based_offset(self):
        request = PageRequest.from_query(page=1, size=4, config=PaginationConfig())

        assert request.offset == 4
        assert request.limit == 4

    def test_size_is_clamped_to_max(self):
        config = PaginationConfig(max_size=20)
        request = PageRequest.from_query(page=2, size=500, config=config)

        assert request.size == 20
        assert request.offset == 40

    def test_defaults_follow_active_configuration(self):
        override = ConfigData(
            pagination=PaginationConfig(default_page=1, default_size=3)
        )
        with with_context(override):
            request = PageRequest.from_query()

        assert request.page == 1
        assert request.size == 3
        assert request.offset == 3

    def test_offset_capped_at_integer_range(self):
        request = PageRequest.from_query(
            page=10**18, size=100, config=PaginationConfig()
        )

        assert request.offset == 2**63 - 1
        assert request.limit == 100

    def test_negative_page_rejected(self):
        with pytest.raises(ValidationError):
            PageRequest(page=-1, size=5)

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError):
            PageRequest(page=0, size=0)


class TestPaginationConfig:
    def test_default_size_cannot_exceed_max(self):
        with pytest.raises(ValidationError):
            PaginationConfig(default_size=50, max_size=10)


class TestMusicPage:
    """Test response shaping."""

    def test_build_and_serialize(self):
        request = PageRequest(page=1, size=2)
        content = [Music(id=3, title="Title 3"), Music(id=4, title="Title 4")]

        page = MusicPage.build(request, content, total=5)
        body = page.model_dump(mode="json", by_alias=True)

        assert [item["title"] for item in body["content"]] == ["Title 3", "Title 4"]
        assert body["page"] == 1
        assert body["size"] == 2
        assert body["totalElements"] == 5
        assert body["totalPages"] == 3

    def test_empty_page(self):
        page = MusicPage.build(PageRequest(page=0, size=5), [], total=0)

        assert page.content == []
        assert page.total_pages == 0
