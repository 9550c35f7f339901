"""Entity package: Music.

- Music: detached domain entity handed to callers
- MusicTable: database persistence model
- MusicRepository: data access layer, owner of the soft-delete predicate
"""

from .entity import Music
from .repository import MusicRepository
from .table import MusicTable

__all__ = ["Music", "MusicRepository", "MusicTable"]
