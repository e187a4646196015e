"""Shared type definitions for vsdown configuration."""

from pathlib import Path
from typing import TypedDict


class NetworkConfig(TypedDict):
    """Network configuration options."""

    timeout_seconds: int


class DirectoryConfig(TypedDict):
    """Directory paths configuration."""

    lib: Path
    bin: Path
    share: Path
    state: Path


class GlobalConfig(TypedDict):
    """Global application configuration."""

    log_level: str
    console_log_level: str
    network: NetworkConfig
    directory: DirectoryConfig
