"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Query, Request
from sqlmodel import Session

from src.music_api.api.http.app_data import ApplicationDependencies
from src.music_api.core.services import DbSessionService, MusicService, PageRequest


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open one session per request and close it once the response is sent."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_music_service(db: Session = Depends(get_db_session)) -> MusicService:
    """Get a MusicService bound to the request's session."""
    return MusicService(db)


def get_page_request(
    page: int | None = Query(default=None, ge=0, description="Zero-based page index"),
    size: int | None = Query(default=None, ge=1, description="Page size"),
) -> PageRequest:
    """Resolve pagination query parameters against the configured defaults."""
    return PageRequest.from_query(page=page, size=size)
