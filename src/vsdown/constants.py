"""Centralized constants module for vsdown.

Constants are grouped by category and use typing.Final annotations.

Usage:
    from vsdown.constants import ANITYA_URL
"""

from typing import Final

# =============================================================================
# Remote endpoints
# =============================================================================

ANITYA_URL: Final[str] = (
    "https://release-monitoring.org/api/v2/versions/?project_id=243355"
)
DOWNLOAD_URL: Final[str] = (
    "https://code.visualstudio.com/sha/download?build=stable&os="
)
USER_AGENT: Final[str] = "vsdown"

# =============================================================================
# Architecture
# =============================================================================

# platform.machine() value -> download/archive tag
ARCH_TAGS: Final[dict[str, str]] = {
    "x86_64": "linux-x64",
    "amd64": "linux-x64",
    "aarch64": "linux-arm64",
    "arm64": "linux-arm64",
}

# =============================================================================
# Version state
# =============================================================================

NONE_SENTINEL: Final[str] = "None"
VERSION_FILE_NAME: Final[str] = "current_version"

# =============================================================================
# Install layout defaults
# =============================================================================

DEFAULT_LIB_DIR: Final[str] = "/usr/lib"
DEFAULT_BIN_DIR: Final[str] = "/usr/bin"
DEFAULT_SHARE_DIR: Final[str] = "/usr/share"
DEFAULT_STATE_DIR: Final[str] = "/var/lib/vsdown"

INSTALL_DIR_NAME: Final[str] = "vscode"
ARCHIVE_DIR_PREFIX: Final[str] = "VSCode-"
BINARY_LINK_NAME: Final[str] = "vscode"
EXECUTABLE_NAME: Final[str] = "code"

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG_FILE: Final[str] = "/etc/vsdown/settings.conf"
CONFIG_ENV_VAR: Final[str] = "VSDOWN_CONFIG"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_DIRECTORY: Final[str] = "directory"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10

# =============================================================================
# Download
# =============================================================================

CHUNK_SIZE: Final[int] = 64 * 1024

# =============================================================================
# Logging
# =============================================================================

LOG_DIR_ENV_VAR: Final[str] = "VSDOWN_LOG_DIR"
LOG_FILE_NAME: Final[str] = "vsdown.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
