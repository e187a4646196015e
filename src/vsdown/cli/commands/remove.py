"""Remove command coordinator."""

from argparse import Namespace

from vsdown.core.http_session import create_http_session
from vsdown.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class RemoveHandler(BaseCommandHandler):
    """Removes the release, its desktop files and the version marker."""

    async def execute(self, args: Namespace) -> None:
        # No request is made; the session only satisfies the installer
        async with create_http_session(self.global_config) as session:
            installer = self._create_installer(
                session, self._create_oracle(session)
            )
            removed = installer.remove()

        if not removed:
            logger.info("Nothing to remove, Visual Studio Code is not installed")
            return
        for path in removed:
            logger.info("✅ Removed %s", path)
