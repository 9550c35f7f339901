from dataclasses import dataclass

from src.music_api.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
