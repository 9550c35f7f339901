from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.music_api.core.services import DbManageService, DbSessionService
from src.music_api.entities.service.music import Music, MusicRepository

from .music import MusicFactory


@pytest.fixture
def music_factory() -> MusicFactory:
    return MusicFactory()


@pytest.fixture
def engine() -> Generator[Engine]:
    """A fresh in-memory database per test, shared across threads."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    DbManageService(engine).create_all()
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine=engine)


@pytest.fixture
def seeded_musics(
    database_service: DbSessionService, music_factory: MusicFactory
) -> list[Music]:
    """Insert 'Title 1' .. 'Title 10' and return them with their ids."""
    with database_service.session_scope() as db:
        return MusicRepository(db).bulk_create(music_factory.ten_first_musics())


@pytest.fixture
def client(database_service: DbSessionService) -> Generator[TestClient]:
    """Test client whose requests run against the in-memory database."""
    from src.music_api.api.http.app import app
    from src.music_api.api.http.app_data import ApplicationDependencies

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    try:
        yield TestClient(app)
    finally:
        app.state.app_dependencies = None
