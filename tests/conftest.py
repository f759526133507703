"""
Shared fixtures.

Every test gets its own configuration directory and default track file under
`tmp_path`, so nothing touches the real home or config directories.
"""

from collections.abc import Callable
from pathlib import Path

import pendulum
import pytest

from track import configuration
from track.repository.configuration import CONFIGURATION_REPO
from track.view import state as view_state


@pytest.fixture(autouse=True)
def isolated_configuration(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(
        configuration, "DEFAULT_TRACK_FILE_PATH", tmp_path / "home" / ".track"
    )
    monkeypatch.setattr(
        configuration, "TRACK_FILE_PATH", tmp_path / "home" / ".track"
    )
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    view_state.set_show_header(True)


@pytest.fixture
def track_file(tmp_path: Path) -> Path:
    return tmp_path / "entries.track"


@pytest.fixture
def local_datetime() -> Callable[..., pendulum.DateTime]:
    """Build a local datetime; noon by default to stay clear of DST edges."""

    def _local_datetime(
        year: int, month: int, day: int, hour: int = 12, minute: int = 0
    ) -> pendulum.DateTime:
        return pendulum.datetime(year, month, day, hour, minute, tz="local")

    return _local_datetime
