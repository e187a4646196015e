"""Filesystem layout of a Visual Studio Code installation."""

from dataclasses import dataclass
from pathlib import Path

from vsdown.constants import (
    ARCHIVE_DIR_PREFIX,
    BINARY_LINK_NAME,
    DEFAULT_BIN_DIR,
    DEFAULT_LIB_DIR,
    DEFAULT_SHARE_DIR,
    DEFAULT_STATE_DIR,
    EXECUTABLE_NAME,
    INSTALL_DIR_NAME,
    VERSION_FILE_NAME,
)
from vsdown.types import GlobalConfig


@dataclass(frozen=True, slots=True)
class InstallLayout:
    """Fixed paths touched by install and remove.

    Attributes:
        lib_dir: Directory the release tree lives in (/usr/lib)
        bin_dir: Directory holding the binary symlink (/usr/bin)
        share_dir: Root of the desktop-integration files (/usr/share)
        state_dir: Directory holding the version marker (/var/lib/vsdown)

    """

    lib_dir: Path = Path(DEFAULT_LIB_DIR)
    bin_dir: Path = Path(DEFAULT_BIN_DIR)
    share_dir: Path = Path(DEFAULT_SHARE_DIR)
    state_dir: Path = Path(DEFAULT_STATE_DIR)

    @classmethod
    def from_config(cls, global_config: GlobalConfig) -> "InstallLayout":
        """Build the layout from the [directory] config section."""
        directory = global_config["directory"]
        return cls(
            lib_dir=directory["lib"],
            bin_dir=directory["bin"],
            share_dir=directory["share"],
            state_dir=directory["state"],
        )

    @property
    def install_dir(self) -> Path:
        """Arch-independent directory the release is installed under."""
        return self.lib_dir / INSTALL_DIR_NAME

    @property
    def previous_install_dir(self) -> Path:
        """Where the old release waits while a new one is moved in."""
        return self.lib_dir / f".{INSTALL_DIR_NAME}-previous"

    @property
    def executable(self) -> Path:
        """Executable inside the install directory."""
        return self.install_dir / EXECUTABLE_NAME

    @property
    def binary_link(self) -> Path:
        """Symlink on PATH pointing at the executable."""
        return self.bin_dir / BINARY_LINK_NAME

    @property
    def version_file(self) -> Path:
        """Version marker file."""
        return self.state_dir / VERSION_FILE_NAME

    @staticmethod
    def archive_dir_name(arch_tag: str) -> str:
        """Top-level directory name inside the release archive."""
        return f"{ARCHIVE_DIR_PREFIX}{arch_tag}"
