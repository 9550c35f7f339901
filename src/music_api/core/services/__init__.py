"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Music Services
from .music.music_service import MusicService
from .music.pagination import MusicPage, PageRequest
from .music.validation import validate_music

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Music Services
    "MusicService",
    "MusicPage",
    "PageRequest",
    "validate_music",
]
