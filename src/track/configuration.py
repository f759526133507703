# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "track"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_TRACK_FILE_PATH: Path = Path.home() / ".track"
DEFAULT_RANGE_DAYS = 7

# Set dynamically by load_track_file_configuration() and the --file option
TRACK_FILE_PATH: Path = DEFAULT_TRACK_FILE_PATH


class Configuration(TypedDict):
    track_file: Optional[str]
    default_range: int
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "track_file": None,
        "default_range": DEFAULT_RANGE_DAYS,
        "show_header": True,
    }


def load_track_file_configuration() -> None:
    """
    Load the configuration and set TRACK_FILE_PATH from its track_file value.

    Must be called after the config file exists and before any entries are
    read or written.
    """
    global TRACK_FILE_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    track_file_setting = config.get("track_file")
    if track_file_setting is not None:
        TRACK_FILE_PATH = Path(track_file_setting).expanduser()
    else:
        TRACK_FILE_PATH = DEFAULT_TRACK_FILE_PATH


def set_track_file_override(track_file: Path) -> None:
    global TRACK_FILE_PATH
    TRACK_FILE_PATH = track_file.expanduser()
