"""Zero-based pagination: page/size query parameters to offset/limit windows."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from src.music_api.entities.core._base import MAX_INTEGER
from src.music_api.entities.service.music import Music
from src.music_api.runtime.config.config_data import PaginationConfig
from src.music_api.runtime.context import get_config


class PageRequest(BaseModel):
    """A resolved pagination window.

    ``page`` is zero-based: page 0 holds records ``[0, size)``, page 1 holds
    ``[size, 2 * size)`` and so on.
    """

    page: int = Field(ge=0)
    size: int = Field(ge=1)

    @classmethod
    def from_query(
        cls,
        page: int | None = None,
        size: int | None = None,
        config: PaginationConfig | None = None,
    ) -> PageRequest:
        """Apply configured defaults to absent parameters and clamp the size."""
        config = config or get_config().pagination
        resolved_page = config.default_page if page is None else page
        resolved_size = config.default_size if size is None else size
        return cls(page=resolved_page, size=min(resolved_size, config.max_size))

    @property
    def offset(self) -> int:
        # Pages past the INTEGER range are simply past the end
        return min(self.page * self.size, MAX_INTEGER)

    @property
    def limit(self) -> int:
        return self.size


class MusicPage(BaseModel):
    """Paginated response body; ``content`` holds at most ``size`` musics."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[Music]
    page: int
    size: int
    total_elements: int

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @classmethod
    def build(cls, request: PageRequest, content: list[Music], total: int) -> MusicPage:
        return cls(
            content=content,
            page=request.page,
            size=request.size,
            total_elements=total,
        )
