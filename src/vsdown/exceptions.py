"""Exception classes for vsdown operations."""

from pathlib import Path


class VsdownError(Exception):
    """Base exception for vsdown operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the resource that failed
                (URL, path, ...).

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class NetworkError(VsdownError):
    """Raised when a remote endpoint cannot be reached."""

    error_prefix = "Network request failed"


class HttpStatusError(VsdownError):
    """Raised when a remote endpoint answers with a non-success status."""

    error_prefix = "Unexpected HTTP status"

    def __init__(self, status: int, url: str) -> None:
        """Initialize with the offending status code and URL."""
        super().__init__(f"server returned HTTP {status}", target=url)
        self.status = status
        self.url = url


class ParseError(VsdownError):
    """Raised when a response body is malformed or misses a field."""

    error_prefix = "Failed to parse response"


class NotFoundError(VsdownError):
    """Raised when the version marker is missing or unreadable."""

    error_prefix = "Version marker not found"


class EmptyStateError(VsdownError):
    """Raised when the version marker exists but holds no bytes."""

    error_prefix = "Version marker is empty"


class UnsupportedArchitectureError(VsdownError):
    """Raised when no release is published for this machine."""

    error_prefix = "Unsupported architecture"

    def __init__(self, machine: str) -> None:
        """Initialize with the unsupported machine name."""
        super().__init__(
            "Visual Studio Code does not support your device's architecture",
            target=machine,
        )
        self.machine = machine


class FilesystemError(VsdownError):
    """Raised when creating, writing, moving or removing a path fails."""

    error_prefix = "Filesystem operation failed"

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize with message and the path that failed."""
        super().__init__(message, target=str(path) if path else None)
        self.path = Path(path) if path else None


class SymlinkError(FilesystemError):
    """Raised when the binary symlink cannot be created."""

    error_prefix = "Could not create symlink for the vscode executable"


class ArchiveError(VsdownError):
    """Raised when the release archive is malformed or laid out unexpectedly."""

    error_prefix = "Invalid release archive"
