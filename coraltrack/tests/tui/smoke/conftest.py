"""Shared fixtures for app-level smoke tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from coraltrack.app import CoralTrackerApp
from coraltrack.constants.defaults import CONFIG_PATH_ENV

TRACKER_YAML = """
save_id: 2
categories:
  fish:
    - {id: 1, name: Salmon, seasons: [fall]}
    - {id: 2, name: Tuna, completed: true}
    - {id: 3, name: Sardine, seasons: [spring, summer]}
npcs:
  - {id: 10, name: Sam, hearts: 4}
altars:
  catch-altar:
    - slug: rare-fish
      name: Rare Fish
      items:
        - {id: 100, name: Coelacanth}
        - {id: 101, name: Sunfish}
        - {id: 102, name: Legend}
    - slug: day-insect
      name: Day Insect
"""


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "tracker.yaml"
    path.write_text(TRACKER_YAML)
    return path


@pytest.fixture
def app(tmp_path: Path, data_file: Path, monkeypatch: pytest.MonkeyPatch) -> CoralTrackerApp:
    """App wired to temporary settings, state and data files."""
    monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "settings.yaml"))
    return CoralTrackerApp(data_path=data_file, state_path=tmp_path / "state.yaml")
