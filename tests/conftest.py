"""Shared fixtures for PlayWise tests."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from playwise.context import AppContext
from playwise.core.config import Config
from playwise.domain.library.catalog import OrderedCatalog
from playwise.domain.library.models import Track
from playwise.domain.library.registry import TrackRegistry
from playwise.domain.session import CatalogSession


@pytest.fixture
def registry() -> TrackRegistry:
    """Create an empty track registry."""
    return TrackRegistry()


@pytest.fixture
def catalog(registry: TrackRegistry) -> OrderedCatalog:
    """Create an empty catalog over the registry fixture."""
    return OrderedCatalog(registry)


@pytest.fixture
def make_track(registry: TrackRegistry):
    """Factory that registers a track with sensible defaults."""

    def _make(title: str, artist: str = "Artist", genre: str = "Pop", duration: int = 180) -> Track:
        return registry.create(title, artist, genre, duration)

    return _make


@pytest.fixture
def filled_catalog(catalog: OrderedCatalog, make_track) -> OrderedCatalog:
    """Catalog holding tracks A, B, C, D in that order."""
    for title in ["A", "B", "C", "D"]:
        catalog.append(make_track(title))
    return catalog


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "playwise_data.txt"


@pytest.fixture
def session(data_file: Path) -> CatalogSession:
    """Create an empty session persisting to a temp file."""
    return CatalogSession(data_file=data_file)


@pytest.fixture
def app_ctx(session: CatalogSession, data_file: Path) -> AppContext:
    """Application context with a captured console and a temp data file."""
    config = Config()
    config.data.data_file = str(data_file)
    console = Console(file=StringIO(), width=120, no_color=True)
    return AppContext.create(config, session, console)
