"""
Pytest configuration for moviedb.

Provides fixtures for:
- a temporary SQLite store seeded with the sample movies
- settings pointing at that store
- a TestClient that runs the app's startup/shutdown hooks
"""
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from moviedb.main import create_app
from moviedb.seed import SAMPLE_MOVIES, seed
from moviedb.utils.config import Settings


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "database.sqlite"
    seed(str(path))
    return path


@pytest.fixture
def test_settings(db_path: Path) -> Settings:
    settings = Settings()
    settings.database_path = str(db_path)
    settings.log_level = "DEBUG"
    return settings


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_movies() -> list:
    return [dict(row) for row in SAMPLE_MOVIES]
