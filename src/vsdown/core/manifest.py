"""Desktop-integration files installed next to the release.

The manifest is plain data: destination paths and the bytes to write
there. The bundled defaults (icon, desktop entries, AppStream metadata,
workspace MIME type) are loaded from package resources, and tests pass
their own entries instead.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from vsdown.exceptions import FilesystemError
from vsdown.logger import get_logger

logger = get_logger(__name__)

RESOURCE_PACKAGE = "vsdown.resources"

# resource file name -> destination relative to the share directory
DEFAULT_ASSETS: dict[str, str] = {
    "code.appdata.xml": "appdata/code.appdata.xml",
    "code.desktop": "applications/code.desktop",
    "code-url-handler.desktop": "applications/code-url-handler.desktop",
    "code-workspace.xml": "mime/packages/code-workspace.xml",
    "com.visualstudio.code.png": "pixmaps/com.visualstudio.code.png",
}


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """One file to install."""

    destination: Path
    content: bytes


class InstallManifest:
    """Fixed set of files plus the directories that must hold them.

    Writing never overwrites an existing destination and removal never
    fails on a missing one, so both operations can be repeated freely.
    """

    def __init__(
        self,
        entries: Iterable[ManifestEntry],
        directories: Iterable[Path] | None = None,
    ) -> None:
        self.entries = tuple(entries)
        if directories is None:
            directories = dict.fromkeys(
                entry.destination.parent for entry in self.entries
            )
        self.directories = tuple(directories)

    @property
    def destinations(self) -> list[Path]:
        return [entry.destination for entry in self.entries]

    def install(self) -> list[Path]:
        """Create the directories and write every missing file.

        Returns:
            Destinations written by this call

        Raises:
            FilesystemError: If a directory or file cannot be created

        """
        for directory in self.directories:
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                msg = f"Failed to create directory: {e}"
                raise FilesystemError(msg, directory) from e

        written: list[Path] = []
        for entry in self.entries:
            # a dangling symlink still occupies the destination
            if entry.destination.exists() or entry.destination.is_symlink():
                logger.debug("Keeping existing %s", entry.destination)
                continue
            try:
                entry.destination.write_bytes(entry.content)
            except OSError as e:
                msg = f"Failed to install file: {e}"
                raise FilesystemError(msg, entry.destination) from e
            written.append(entry.destination)
            logger.debug("Installed %s", entry.destination)
        return written

    def remove(self) -> list[Path]:
        """Delete every destination that exists.

        Returns:
            Destinations deleted by this call

        Raises:
            FilesystemError: If an existing file cannot be deleted

        """
        removed: list[Path] = []
        for destination in self.destinations:
            if not (destination.exists() or destination.is_symlink()):
                continue
            try:
                destination.unlink()
            except OSError as e:
                msg = f"Failed to remove file: {e}"
                raise FilesystemError(msg, destination) from e
            removed.append(destination)
            logger.debug("Removed %s", destination)
        return removed


def default_manifest(share_dir: Path) -> InstallManifest:
    """Build the manifest from the bundled assets.

    Args:
        share_dir: Root the destinations are placed under (/usr/share)

    """
    package_files = resources.files(RESOURCE_PACKAGE)
    entries = [
        ManifestEntry(
            destination=share_dir / relative,
            content=package_files.joinpath(name).read_bytes(),
        )
        for name, relative in DEFAULT_ASSETS.items()
    ]
    return InstallManifest(entries)
