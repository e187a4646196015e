"""Version marker persistence.

The installed release is tracked by a single plain-text file holding
the version string. VersionStore is the narrow interface the oracle and
installer depend on; FileVersionStore is the only production backend.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from vsdown.exceptions import FilesystemError
from vsdown.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class VersionStore(Protocol):
    """Storage for the locally recorded version string."""

    def read(self) -> str | None:
        """Return the raw stored content, or None if nothing is readable."""
        ...

    def write(self, version: str) -> None:
        """Replace the stored content with ``version``."""
        ...

    def delete(self) -> bool:
        """Remove the stored value. Returns True if something was removed."""
        ...


class FileVersionStore:
    """VersionStore backed by the marker file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Version marker %s does not exist", self.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Version marker %s is unreadable: %s", self.path, e)
        return None

    def write(self, version: str) -> None:
        # Truncates, so a shorter version never keeps a longer one's tail
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(version, encoding="utf-8")
        except OSError as e:
            msg = f"Failed to record version: {e}"
            raise FilesystemError(msg, self.path) from e
        logger.debug("Recorded version %s in %s", version, self.path)

    def delete(self) -> bool:
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except OSError as e:
            msg = f"Failed to remove version marker: {e}"
            raise FilesystemError(msg, self.path) from e
        return True
