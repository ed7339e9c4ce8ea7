from __future__ import annotations

from pathlib import Path

import pytest

from core.credits_index.record_buffer import RecordBuffer
from core.path_engine.credits_graph import CreditsGraph
from core.utilities.config_manager import config_manager

from credits_fixtures import SMALL_WORLD, build_credits, write_credits


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the real config.json and data directory override."""
    monkeypatch.delenv("SIXDEGREES_DATA_DIR", raising=False)
    monkeypatch.setattr(config_manager, "config_path", tmp_path / "config.json")
    monkeypatch.setattr(config_manager, "settings", dict(config_manager.DEFAULT_SETTINGS))
    yield config_manager


@pytest.fixture
def small_world_bytes() -> tuple[bytes, bytes]:
    return build_credits(SMALL_WORLD)


@pytest.fixture
def small_world_buffers(small_world_bytes) -> tuple[RecordBuffer, RecordBuffer]:
    actor_data, movie_data = small_world_bytes
    return RecordBuffer(actor_data, "actordata"), RecordBuffer(movie_data, "moviedata")


@pytest.fixture
def small_world_graph(small_world_buffers) -> CreditsGraph:
    return CreditsGraph(*small_world_buffers)


@pytest.fixture
def small_world_dir(tmp_path: Path, small_world_bytes) -> Path:
    return write_credits(tmp_path / "data", *small_world_bytes)
