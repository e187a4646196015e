"""Global configuration manager for INI settings.

The settings file is optional. Missing files, sections or keys fall
back to the defaults below, so a fresh system needs no configuration:

    [DEFAULT]
    log_level = INFO
    console_log_level = INFO

    [network]
    timeout_seconds = 10

    [directory]
    lib = /usr/lib
    bin = /usr/bin
    share = /usr/share
    state = /var/lib/vsdown
"""

import configparser
import logging
import os
from pathlib import Path

from vsdown.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_BIN_DIR,
    DEFAULT_CONFIG_FILE,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LIB_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SHARE_DIR,
    DEFAULT_STATE_DIR,
    DEFAULT_TIMEOUT_SECONDS,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
)
from vsdown.types import DirectoryConfig, GlobalConfig, NetworkConfig

logger = logging.getLogger(__name__)

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigManager:
    """Loads the global INI configuration."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            settings_file: Path to settings.conf (defaults to
                $VSDOWN_CONFIG, then /etc/vsdown/settings.conf)

        """
        if settings_file is None:
            settings_file = Path(
                os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)
            ).expanduser()
        self.settings_file = settings_file

    def get_default_global_config(self) -> dict[str, dict[str, str]]:
        """Get default configuration values as raw INI sections."""
        return {
            SECTION_DEFAULT: {
                KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
                KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            },
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_DIRECTORY: {
                "lib": DEFAULT_LIB_DIR,
                "bin": DEFAULT_BIN_DIR,
                "share": DEFAULT_SHARE_DIR,
                "state": DEFAULT_STATE_DIR,
            },
        }

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration, layering the file over defaults.

        Returns:
            Typed global configuration

        """
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        config.read_dict(self.get_default_global_config())

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Ignoring malformed config %s: %s", self.settings_file, e
                )
                config = configparser.ConfigParser(interpolation=None)
                config.read_dict(self.get_default_global_config())
        else:
            logger.debug(
                "No config at %s, using defaults", self.settings_file
            )

        return self._convert_to_global_config(config)

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert a populated ConfigParser to the typed GlobalConfig."""
        defaults = config[SECTION_DEFAULT]
        network: NetworkConfig = {
            "timeout_seconds": self._get_positive_int(
                config, SECTION_NETWORK, KEY_TIMEOUT_SECONDS,
                DEFAULT_TIMEOUT_SECONDS,
            ),
        }
        directory_section = config[SECTION_DIRECTORY]
        directory: DirectoryConfig = {
            "lib": Path(directory_section["lib"]).expanduser(),
            "bin": Path(directory_section["bin"]).expanduser(),
            "share": Path(directory_section["share"]).expanduser(),
            "state": Path(directory_section["state"]).expanduser(),
        }
        return {
            "log_level": self._get_level(
                defaults.get(KEY_LOG_LEVEL), DEFAULT_LOG_LEVEL
            ),
            "console_log_level": self._get_level(
                defaults.get(KEY_CONSOLE_LOG_LEVEL), DEFAULT_CONSOLE_LOG_LEVEL
            ),
            "network": network,
            "directory": directory,
        }

    @staticmethod
    def _get_positive_int(
        config: configparser.ConfigParser,
        section: str,
        key: str,
        default: int,
    ) -> int:
        raw = config.get(section, key, fallback=str(default))
        try:
            value = int(raw)
        except ValueError:
            logger.warning(
                "Invalid %s.%s=%r in config, using %s",
                section, key, raw, default,
            )
            return default
        if value <= 0:
            logger.warning(
                "%s.%s must be positive, using %s", section, key, default
            )
            return default
        return value

    @staticmethod
    def _get_level(raw: str | None, default: str) -> str:
        level = (raw or default).strip().upper()
        if level not in _VALID_LEVELS:
            logger.warning("Invalid log level %r, using %s", raw, default)
            return default
        return level
