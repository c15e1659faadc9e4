# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import platform
from pathlib import Path
from threading import Lock
from typing import Any, Dict, NamedTuple, Optional, Union

import tomlkit
from loguru import logger

APP_NAME = "realparent"
CONFIG_FILE_NAME = "config.toml"
DEFAULT_LOG_LEVEL = "INFO"


class LoggingSettings(NamedTuple):
    enabled: bool
    level: str


def validate_level(level: Any) -> str:
    """Normalize a loguru level name, e.g. "debug" becomes "DEBUG".

    Raises:
        ValueError: If loguru has no level with that name.
    """
    if not isinstance(level, str):
        raise ValueError(f"log level must be a string, not {level!r}")
    return logger.level(level.upper()).name


def config_file_path(app_name: str, config_dir: Optional[Union[str, Path]] = None) -> Path:
    """Where the config file for app_name lives.

    ``config_dir/app_name/config.toml`` when config_dir is given, otherwise under
    ``%APPDATA%`` on Windows and ``$XDG_CONFIG_HOME`` (``~/.config``) elsewhere.
    """
    if config_dir:
        base_dir = Path(config_dir)
    elif platform.system() == "Windows":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return (base_dir / app_name / CONFIG_FILE_NAME).expanduser()


class ConfigManager:
    """Settings for realparent, stored in a TOML file.

    There is one instance per application name. The file is read once, when that instance
    is created, so edits made by other processes are not seen until the instance is
    deleted with ``delete_instance`` and recreated.

    Recognized settings:
        [logging]
        enabled = true      # turn on realparent's loguru output in configure_logging()
        level = "DEBUG"     # loguru level name, default "INFO"

    Attributes:
        app_name (str): The name of the application. (Default: 'realparent')
        config_file_path (Path): The path to the configuration file.
        config (tomlkit.TOMLDocument): The loaded document. Preserves formatting and comments.
    """

    _instances: Dict[str, "ConfigManager"] = {}
    _lock = Lock()

    def __new__(
        cls, app_name: str = APP_NAME, config_dir: Optional[Union[str, Path]] = None
    ) -> "ConfigManager":
        with cls._lock:
            instance = cls._instances.get(app_name)
            if instance is None:
                instance = super().__new__(cls)
                instance._setup(app_name, config_dir)
                cls._instances[app_name] = instance
            return instance

    def _setup(self, app_name: str, config_dir: Optional[Union[str, Path]]) -> None:
        self.app_name = app_name
        self.config_file_path = config_file_path(app_name, config_dir)
        if self.config_file_path.exists():
            self.config = tomlkit.parse(self.config_file_path.read_text())
            logger.trace("Loaded settings from {}", self.config_file_path)
        else:
            self.config = tomlkit.document()

    def get(self, section: str, option: str, fallback: Optional[Any] = None) -> Any:
        """Gets a configuration value.

        Args:
            section (str): The table within the configuration file, e.g. 'logging'.
            option (str): The key within the table, e.g. 'level'.
            fallback (Optional[Any]): Returned when the option is not set.

        Returns:
            Any: The configuration value or the fallback value.
        """
        return self.config.get(section, {}).get(option, fallback)

    def set(self, section: str, option: str, value: Any) -> None:
        """Sets a configuration value and writes the file straight away."""
        if section not in self.config:
            self.config[section] = tomlkit.table()
        self.config[section][option] = value
        self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_file_path.write_text(tomlkit.dumps(self.config))

    def logging_settings(self) -> LoggingSettings:
        """The ``[logging]`` table, checked and filled in with defaults.

        Returns:
            LoggingSettings: ``enabled`` (default False) and an upper-case loguru level
            name (default "INFO").

        Raises:
            ValueError: If ``enabled`` is not a boolean or ``level`` is not a loguru level.
        """
        enabled = self.get("logging", "enabled", fallback=False)
        if not isinstance(enabled, bool):
            raise ValueError(
                f"[logging] enabled in {self.config_file_path} must be true or false, not {enabled!r}"
            )
        try:
            level = validate_level(self.get("logging", "level", fallback=DEFAULT_LOG_LEVEL))
        except ValueError as e:
            raise ValueError(f"[logging] level in {self.config_file_path}: {e}") from e
        return LoggingSettings(enabled, level)

    @classmethod
    def delete_instance(cls, app_name: str) -> None:
        """Forget the instance for app_name; the next ConfigManager(app_name) rereads the file."""
        with cls._lock:
            cls._instances.pop(app_name, None)
