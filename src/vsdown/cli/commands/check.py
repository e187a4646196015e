"""Check command coordinator."""

from argparse import Namespace

from vsdown.core.http_session import create_http_session
from vsdown.core.version import UpToDate
from vsdown.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class CheckHandler(BaseCommandHandler):
    """Reports whether the recorded version is the latest release."""

    advisory = True

    async def execute(self, args: Namespace) -> None:
        async with create_http_session(self.global_config) as session:
            result = await self._create_oracle(session).check_up_to_date()

        if isinstance(result, UpToDate):
            logger.info(
                "✅ Your VSCode version is latest! (%s)", result.version
            )
        else:
            logger.info("%s", result)
