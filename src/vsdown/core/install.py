"""Download, install and removal of the Visual Studio Code release.

ReleaseInstaller owns every filesystem change vsdown makes: the release
tree under the library directory, the binary symlink, the manifest
files and the version marker.

An existing install is only touched once the new release has been fully
extracted into a staging directory next to it. The old tree is then
moved aside, the new one renamed into place and the old one deleted, so
a failed extraction or rename never leaves the system without a
release.
"""

import asyncio
import gzip
import io
import shutil
import tarfile
import tempfile
import zlib
from pathlib import Path

import aiohttp

from vsdown.constants import CHUNK_SIZE, DOWNLOAD_URL
from vsdown.core.http_session import checked_get
from vsdown.core.layout import InstallLayout
from vsdown.core.manifest import InstallManifest
from vsdown.core.protocols import NullProgressReporter, ProgressReporter
from vsdown.core.state import VersionStore
from vsdown.core.version import VersionOracle
from vsdown.exceptions import ArchiveError, FilesystemError, SymlinkError
from vsdown.logger import get_logger
from vsdown.utils.arch import get_arch_tag

logger = get_logger(__name__)

STAGING_PREFIX = ".vsdown-staging-"


def _keep_mode_filter(member: tarfile.TarInfo, path: str) -> tarfile.TarInfo:
    """Apply the "tar" filter's path checks but keep the archive's mode.

    Setuid, setgid and group or other write bits survive extraction.
    """
    filtered = tarfile.tar_filter(member, path)
    return filtered.replace(mode=member.mode, deep=False)


class ReleaseInstaller:
    """Installs and removes the release described by an InstallLayout."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        layout: InstallLayout,
        manifest: InstallManifest,
        store: VersionStore,
        oracle: VersionOracle,
        progress_reporter: ProgressReporter | None = None,
        download_url: str = DOWNLOAD_URL,
        machine: str | None = None,
    ) -> None:
        """Initialize the installer.

        Args:
            session: HTTP session used for the archive download
            layout: Paths the release is installed to
            manifest: Desktop-integration files to install and remove
            store: Version marker storage
            oracle: Used to re-fetch the latest version after install
            progress_reporter: Receives download progress.
                Uses NullProgressReporter if not provided.
            download_url: Download endpoint, the arch tag is appended
            machine: Architecture override; platform.machine() if None

        """
        self.session = session
        self.layout = layout
        self.manifest = manifest
        self.store = store
        self.oracle = oracle
        self.progress_reporter = progress_reporter or NullProgressReporter()
        self.download_url = download_url
        self.machine = machine

    async def download_archive(self) -> tuple[bytes, str]:
        """Download the release tarball for this machine into memory.

        Returns:
            Tuple of (archive bytes, arch tag)

        Raises:
            UnsupportedArchitectureError: Before any request is made, if
                no release exists for this machine
            NetworkError: If the download fails in transit
            HttpStatusError: If the endpoint answers with a non-2xx status

        """
        arch_tag = get_arch_tag(self.machine)
        url = f"{self.download_url}{arch_tag}"

        logger.info("Downloading latest Visual Studio Code release ...")
        logger.debug("   URL: %s", url)

        async with checked_get(self.session, url) as response:
            total = response.content_length
            logger.debug(
                "   Size: %s bytes" if total else "   Size: %s",
                f"{total:,}" if total else "Unknown",
            )

            reporter = self.progress_reporter
            task_id: str | None = None
            if reporter.is_active():
                task_id = await reporter.add_task(
                    f"VSCode-{arch_tag}.tar.gz", total=total
                )

            success = False
            buffer = bytearray()
            try:
                async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                    buffer.extend(chunk)
                    if task_id is not None:
                        await reporter.update_task(
                            task_id, completed=len(buffer)
                        )
                success = True
            finally:
                if task_id is not None:
                    await reporter.finish_task(task_id, success=success)

        logger.debug("Downloaded %d bytes", len(buffer))
        return bytes(buffer), arch_tag

    async def install(self, archive: bytes, arch_tag: str) -> None:
        """Install a downloaded release archive.

        Args:
            archive: gzip-compressed tarball from download_archive()
            arch_tag: Arch tag the archive was downloaded for

        Raises:
            ArchiveError: If the archive is malformed or lacks the
                expected top-level directory
            FilesystemError: If a path cannot be created, moved or removed
            SymlinkError: If the binary symlink cannot be created
            NetworkError: If re-fetching the latest version fails
            HttpStatusError: Likewise, on a non-2xx answer
            ParseError: Likewise, on a malformed answer

        """
        logger.info("Download complete, unpacking release ...")
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, self._install_release_tree, archive, arch_tag
        )

        self._link_binary()

        logger.info(
            "Installing AppStream metadata, desktop entry, "
            "and MIME type handler ..."
        )
        self.manifest.install()

        latest = await self.oracle.fetch_remote_version()
        self.store.write(latest)
        logger.info("✅ Visual Studio Code %s installed", latest)

    async def install_latest(self) -> None:
        """Download the latest release and install it."""
        archive, arch_tag = await self.download_archive()
        await self.install(archive, arch_tag)

    def remove(self) -> list[Path]:
        """Remove everything install() creates.

        Every step checks for existence first, so calling this on a
        system without an install is a no-op.

        Returns:
            Paths that were removed

        Raises:
            FilesystemError: If an existing path cannot be removed

        """
        logger.info("Uninstalling Visual Studio Code ...")
        removed = self.manifest.remove()

        # leftovers of an interrupted install count as part of the release
        trees = [self.layout.install_dir, self.layout.previous_install_dir]
        if self.layout.lib_dir.is_dir():
            trees.extend(sorted(self.layout.lib_dir.glob(f"{STAGING_PREFIX}*")))
        for tree in trees:
            if tree.exists() or tree.is_symlink():
                self._remove_tree(tree)
                removed.append(tree)

        link = self.layout.binary_link
        if link.exists() or link.is_symlink():
            try:
                link.unlink()
            except OSError as e:
                msg = f"Failed to remove binary link: {e}"
                raise FilesystemError(msg, link) from e
            removed.append(link)

        if self.store.delete():
            removed.append(self.layout.version_file)

        logger.debug("Removed %d path(s)", len(removed))
        return removed

    def _install_release_tree(self, archive: bytes, arch_tag: str) -> None:
        """Extract into a staging directory and swap it into place."""
        lib_dir = self.layout.lib_dir
        try:
            lib_dir.mkdir(parents=True, exist_ok=True)
            staging = Path(
                tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=lib_dir)
            )
        except OSError as e:
            msg = f"Failed to create staging directory: {e}"
            raise FilesystemError(msg, lib_dir) from e

        try:
            self._extract(archive, staging)
            extracted = staging / self.layout.archive_dir_name(arch_tag)
            if not extracted.is_dir():
                msg = (
                    "expected top-level directory "
                    f"'{extracted.name}' in the archive"
                )
                raise ArchiveError(msg)
            self._swap_into_place(extracted)
        finally:
            shutil.rmtree(staging, ignore_errors=True)

    @staticmethod
    def _extract(archive: bytes, destination: Path) -> None:
        """Unpack a gzip tarball, keeping modes and ownership.

        Absolute paths and members escaping the destination are still
        rejected by the "tar" filter.
        """
        try:
            with tarfile.open(fileobj=io.BytesIO(archive), mode="r:gz") as tar:
                tar.extractall(destination, filter=_keep_mode_filter)
        except (tarfile.TarError, gzip.BadGzipFile, EOFError, zlib.error) as e:
            msg = f"could not unpack release: {e}"
            raise ArchiveError(msg) from e
        except OSError as e:
            msg = f"Failed to extract release: {e}"
            raise FilesystemError(msg, destination) from e

    def _swap_into_place(self, extracted: Path) -> None:
        install_dir = self.layout.install_dir
        previous: Path | None = None

        if install_dir.exists() or install_dir.is_symlink():
            previous = self.layout.previous_install_dir
            if previous.exists():
                self._remove_tree(previous)
            try:
                install_dir.rename(previous)
            except OSError as e:
                msg = f"Failed to move previous install aside: {e}"
                raise FilesystemError(msg, install_dir) from e

        try:
            extracted.rename(install_dir)
        except OSError as e:
            if previous is not None:
                try:
                    previous.rename(install_dir)
                except OSError:
                    logger.exception(
                        "Could not restore previous install from %s", previous
                    )
            msg = f"Failed to move release into place: {e}"
            raise FilesystemError(msg, install_dir) from e

        if previous is not None:
            self._remove_tree(previous)

    def _link_binary(self) -> None:
        link = self.layout.binary_link
        try:
            link.parent.mkdir(parents=True, exist_ok=True)
            if link.is_symlink():
                link.unlink()
            link.symlink_to(self.layout.executable)
        except OSError as e:
            raise SymlinkError(str(e), link) from e
        logger.debug("Linked %s -> %s", link, self.layout.executable)

    @staticmethod
    def _remove_tree(path: Path) -> None:
        try:
            if path.is_symlink() or not path.is_dir():
                path.unlink()
            else:
                shutil.rmtree(path)
        except OSError as e:
            msg = f"Failed to remove directory: {e}"
            raise FilesystemError(msg, path) from e
