"""Version checking against release-monitoring.org.

VersionOracle answers two questions: which release is the newest one
published, and which one did vsdown record as installed. The recorded
version is compared as a plain string, never parsed as semver.
"""

from dataclasses import dataclass

import aiohttp
import orjson

from vsdown.constants import ANITYA_URL, NONE_SENTINEL
from vsdown.core.http_session import checked_get
from vsdown.core.state import VersionStore
from vsdown.exceptions import EmptyStateError, NotFoundError, ParseError
from vsdown.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class UpToDate:
    """The recorded version matches the latest release."""

    version: str


@dataclass(frozen=True, slots=True)
class OutOfDate:
    """The recorded version differs from the latest release."""

    local: str
    remote: str

    def __str__(self) -> str:
        return (
            "Different/newer Visual Studio Code version found. "
            f"Current version: {self.local}, "
            f"latest available version: {self.remote}."
        )


CheckResult = UpToDate | OutOfDate


def normalize_version(raw: str) -> str:
    """Drop every newline and space character, wherever it appears."""
    return raw.replace("\n", "").replace(" ", "")


class VersionOracle:
    """Resolves and compares the remote and locally recorded versions."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        store: VersionStore,
        url: str = ANITYA_URL,
    ) -> None:
        """Initialize the oracle.

        Args:
            session: HTTP session used for the version query
            store: Storage of the locally recorded version
            url: Anitya versions endpoint

        """
        self.session = session
        self.store = store
        self.url = url

    async def fetch_remote_version(self) -> str:
        """Fetch the latest published version.

        Returns:
            Value of the ``latest_version`` field

        Raises:
            NetworkError: If the endpoint cannot be reached
            HttpStatusError: If the endpoint answers with a non-2xx status
            ParseError: If the body is not JSON or lacks the field

        """
        logger.info("Checking for Visual Studio Code update ...")
        async with checked_get(self.session, self.url) as response:
            body = await response.read()

        try:
            payload = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            msg = f"invalid JSON: {e}"
            raise ParseError(msg, target=self.url) from e

        if not isinstance(payload, dict):
            msg = "expected a JSON object"
            raise ParseError(msg, target=self.url)
        latest = payload.get("latest_version")
        if not isinstance(latest, str):
            msg = "missing string field 'latest_version'"
            raise ParseError(msg, target=self.url)

        logger.debug("Latest available version: %s", latest)
        return latest

    def read_local_version(self) -> str:
        """Read the recorded version with newlines and spaces removed.

        Raises:
            NotFoundError: If the marker is absent or unreadable
            EmptyStateError: If the marker holds no bytes

        """
        raw = self.store.read()
        if raw is None:
            msg = "no version has been recorded"
            raise NotFoundError(msg)
        if not raw:
            msg = (
                "Failed to detect Visual Studio Code version for the "
                "current installation"
            )
            raise EmptyStateError(msg)
        return normalize_version(raw)

    def ensure_initialized(self) -> str:
        """Return the recorded version, recording "None" on first run.

        This is the one read that writes: a missing, unreadable or empty
        marker is replaced by the sentinel so later runs find a valid
        state.

        Raises:
            FilesystemError: If the sentinel cannot be written

        """
        try:
            return self.read_local_version()
        except (NotFoundError, EmptyStateError) as e:
            logger.debug("Initializing version marker: %s", e)

        logger.info(
            "Recording current Visual Studio Code version information ..."
        )
        self.store.write(NONE_SENTINEL)
        return NONE_SENTINEL

    async def check_up_to_date(self) -> CheckResult:
        """Compare the recorded version with the latest release.

        Returns:
            UpToDate if both strings are equal, OutOfDate otherwise

        """
        remote = await self.fetch_remote_version()
        local = self.ensure_initialized()
        if local == remote:
            return UpToDate(remote)
        return OutOfDate(local=local, remote=remote)
