"""
Settings for the demo commands.

An optional YAML file overrides the built-in demo settings:

    linq:
      range_end: 10   # the source list is range(range_end)
      appended: 11    # appended between the two materializations
    logging:
      level: INFO

Anything the file leaves out keeps its built-in value.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULTS: Dict[str, Any] = {
    "linq": {"range_end": 10, "appended": 11},
    "logging": {"level": "INFO"},
}

_MISSING = object()


def _lookup(data: Dict[str, Any], key: str) -> Any:
    value: Any = data
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


class Config:
    """
    Demo settings read with dotted keys, e.g. ``config.get("linq.appended")``.

    A key missing from the loaded data falls back to `DEFAULTS`, and only
    then to the `default` passed to `get`.
    """

    def __init__(self, config_data: Optional[Dict[str, Any]] = None):
        self._config = config_data or {}

    def get(self, key: str, default: Any = None) -> Any:
        for source in (self._config, DEFAULTS):
            value = _lookup(source, key)
            if value is not _MISSING:
                return value
        return default

    @property
    def range_end(self) -> int:
        return self._int_setting("linq.range_end")

    @property
    def appended(self) -> int:
        return self._int_setting("linq.appended")

    @property
    def log_level(self) -> int:
        """The `logging.level` setting as a stdlib logging level number."""
        return self._level_setting("logging.level")

    def validate(self) -> None:
        """Raises ValueError for the first setting that has an unusable value."""
        self._int_setting("linq.range_end")
        self._int_setting("linq.appended")
        self._level_setting("logging.level")

    def _level_setting(self, key: str) -> int:
        name = str(self.get(key)).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level in configuration: '{name}'")
        return level

    def _int_setting(self, key: str) -> int:
        value = self.get(key)
        # bool is an int subclass, but `range_end: yes` is a mistake.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Setting '{key}' must be an integer, got {value!r}")
        return value

    def __repr__(self) -> str:
        return f"Config(config_data={self._config})"


def load_config(path: Optional[Union[str, Path]]) -> Config:
    """
    Reads demo settings from a YAML file.

    No path, or a path that is not a file, gives the built-in settings.
    Malformed YAML raises `yaml.YAMLError`; a document that is not a
    mapping raises `ValueError`.
    """
    if not path or not Path(path).is_file():
        return Config()

    with Path(path).open("r") as f:
        data = yaml.safe_load(f)

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Configuration file '{path}' must hold a mapping, got {type(data).__name__}")
    return Config(data)
