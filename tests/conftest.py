"""Shared fixtures: an in-memory database, a store bound to it, and an API client."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from finance_tracker.api.dependencies import get_settings, get_store
from finance_tracker.core.db import Category, init_db
from finance_tracker.core.settings import Settings
from finance_tracker.core.store import SQLAlchemyStore
from finance_tracker.main import app

CSV_HEADER = "title,type,value,category\n"


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine shared across threads, with the tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def store(session_factory: sessionmaker) -> Iterator[SQLAlchemyStore]:
    store = SQLAlchemyStore(session_factory())
    yield store
    store.close()


@pytest.fixture
def category_titles(store: SQLAlchemyStore) -> Callable[[], list[str]]:
    """Return a function listing every persisted category title, sorted."""

    def _titles() -> list[str]:
        return sorted(store.session.scalars(select(Category.title)))

    return _titles


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def client(session_factory: sessionmaker, upload_dir: Path) -> Iterator[TestClient]:
    """API client whose routes use the in-memory database and a temporary upload dir."""

    def _store() -> Iterator[SQLAlchemyStore]:
        store = SQLAlchemyStore(session_factory())
        try:
            yield store
        finally:
            store.close()

    app.dependency_overrides[get_store] = _store
    app.dependency_overrides[get_settings] = lambda: Settings(upload_dir=str(upload_dir))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV rows (after a header line) to a file and return its path."""

    def _write(body: str, name: str = "import.csv", header: str = CSV_HEADER) -> Path:
        path = tmp_path / name
        path.write_text(header + body, encoding="utf-8")
        return path

    return _write
