"""Database initialization script."""

from src.music_api.core.services import DbManageService, DbSessionService


def init_db(drop: bool = False) -> None:
    """Create all database tables, optionally dropping existing ones first."""
    database_service = DbSessionService()
    manage_service = DbManageService(database_service.engine)
    if drop:
        manage_service.drop_all()
    manage_service.create_all()
    database_service.dispose()


if __name__ == "__main__":
    init_db()
