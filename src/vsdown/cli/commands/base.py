"""Base command handler for vsdown CLI commands.

Handlers are thin coordinators: they build the core services from the
global configuration, run them and report the outcome through the
logger. CLIRunner is the composition root and passes the loaded
configuration in.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

import aiohttp

from vsdown.config import ConfigManager
from vsdown.core.install import ReleaseInstaller
from vsdown.core.layout import InstallLayout
from vsdown.core.manifest import InstallManifest, default_manifest
from vsdown.core.protocols import ProgressReporter
from vsdown.core.state import FileVersionStore, VersionStore
from vsdown.core.version import VersionOracle
from vsdown.types import GlobalConfig


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    Attributes:
        advisory: When True a failure is reported but does not change
            the process exit status.

    """

    advisory: bool = False

    def __init__(
        self,
        config_manager: ConfigManager,
        global_config: GlobalConfig | None = None,
        store: VersionStore | None = None,
        manifest: InstallManifest | None = None,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config_manager: Configuration management instance
            global_config: Loaded configuration (loaded if None)
            store: Version marker storage (file store from layout if None)
            manifest: Desktop files (bundled defaults if None)

        """
        self.config_manager = config_manager
        self.global_config = (
            global_config or config_manager.load_global_config()
        )
        self.layout = InstallLayout.from_config(self.global_config)
        self.store = store or FileVersionStore(self.layout.version_file)
        self._manifest = manifest

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments."""

    @property
    def manifest(self) -> InstallManifest:
        if self._manifest is None:
            self._manifest = default_manifest(self.layout.share_dir)
        return self._manifest

    def _create_oracle(self, session: aiohttp.ClientSession) -> VersionOracle:
        return VersionOracle(session, self.store)

    def _create_installer(
        self,
        session: aiohttp.ClientSession,
        oracle: VersionOracle,
        progress_reporter: ProgressReporter | None = None,
    ) -> ReleaseInstaller:
        return ReleaseInstaller(
            session=session,
            layout=self.layout,
            manifest=self.manifest,
            store=self.store,
            oracle=oracle,
            progress_reporter=progress_reporter,
        )
