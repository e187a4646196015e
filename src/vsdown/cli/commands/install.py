"""Install command coordinator."""

from argparse import Namespace

from vsdown.core.http_session import create_http_session
from vsdown.core.version import UpToDate
from vsdown.logger import get_logger
from vsdown.ui.progress import AsciiProgressBar

from .base import BaseCommandHandler

logger = get_logger(__name__)


class InstallHandler(BaseCommandHandler):
    """Installs the latest release when out of date or forced."""

    async def execute(self, args: Namespace) -> None:
        async with create_http_session(self.global_config) as session:
            oracle = self._create_oracle(session)

            if args.force:
                logger.info("Forcing installation of the latest release ...")
            else:
                result = await oracle.check_up_to_date()
                if isinstance(result, UpToDate):
                    logger.info(
                        "✅ Your VSCode version is latest! (%s)",
                        result.version,
                    )
                    return
                logger.info("%s", result)

            installer = self._create_installer(
                session, oracle, progress_reporter=AsciiProgressBar()
            )
            await installer.install_latest()
