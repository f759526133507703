# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from track import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = defaults
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            self._config = defaults
            return

        # Fill in fields added after the config file was written
        if "track_file" not in self._config:
            self._config["track_file"] = defaults["track_file"]
        if "default_range" not in self._config:
            self._config["default_range"] = defaults["default_range"]
        if "show_header" not in self._config:
            self._config["show_header"] = defaults["show_header"]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        track_file: Optional[str] = None,
        remove_track_file: bool = False,
        default_range: Optional[int] = None,
        show_header: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if track_file is not None:
            self.config["track_file"] = track_file
        if remove_track_file:
            self.config["track_file"] = None
        if default_range is not None:
            self.config["default_range"] = default_range
        if show_header is not None:
            self.config["show_header"] = show_header


CONFIGURATION_REPO = ConfigurationRepository()
