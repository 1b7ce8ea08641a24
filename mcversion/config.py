"""Configuration file access for mcversion tooling"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import Optional, Any

APP_NAME = "mcversion"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/mcversion").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))

logger = logging.getLogger(__name__)


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Missing files, sections or keys are handled gracefully.

    Usage:
        config = ConfigAccessor()
        value = config.get('server', 'minecraft_version', default=None)
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path)
            logger.debug(f"Loaded configuration from {self.config_path}")

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def set(self, section: str, key: str, value: str) -> None:
        """Set a configuration value, creating the section if needed."""
        if not self.config.has_section(section):
            self.config.add_section(section)

        self.config[section][key] = value

    def save(self) -> None:
        """
        Save the current configuration to the config file.

        Fails gracefully if the file cannot be written (e.g., read-only filesystem).
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as configfile:
                self.config.write(configfile)
        except OSError as e:
            logger.warning(
                f"Could not save configuration to {self.config_path}: {e}. "
                "Configuration changes will not persist."
            )

    def sections(self) -> list:
        return self.config.sections()

    def options(self, section: str) -> list:
        """
        Get all options (keys) in a section.

        Returns:
            List of options in the section or empty list if section doesn't exist
        """
        try:
            return self.config.options(section)
        except configparser.NoSectionError:
            return []
