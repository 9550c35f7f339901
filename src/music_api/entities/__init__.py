"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model handed to callers
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.music import Music, MusicRepository, MusicTable

__all__ = [
    "Music",
    "MusicTable",
    "MusicRepository",
]
