"""CLI runner for vsdown.

Routes parsed arguments to the command handlers and turns failures
into exit codes.
"""

import sys
from collections.abc import Sequence

from vsdown import __version__
from vsdown.config import ConfigManager
from vsdown.logger import get_logger, set_console_level, update_logger_levels

from .commands import (
    BaseCommandHandler,
    CheckHandler,
    InstallHandler,
    RemoveHandler,
)
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Configuration manager (creates default if None)

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_levels(
            self.global_config["console_log_level"],
            self.global_config["log_level"],
        )

        self.command_handlers: dict[str, BaseCommandHandler] = {
            "install": InstallHandler(self.config_manager, self.global_config),
            "check": CheckHandler(self.config_manager, self.global_config),
            "remove": RemoveHandler(self.config_manager, self.global_config),
        }

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """Parse arguments and run the selected command.

        Exits with status 1 when a command fails, unless the command
        is advisory (``check``).
        """
        parser = CLIParser()
        args = parser.parse_args(argv)

        if args.version:
            print(__version__)
            return

        if not args.command:
            parser.print_help()
            sys.exit(1)

        handler = self.command_handlers[args.command]
        verbose = getattr(args, "verbose", False)
        if verbose:
            set_console_level("DEBUG")

        try:
            await handler.execute(args)
        except Exception as e:
            logger.error("❌ %s", e)
            logger.debug("Command %s failed", args.command, exc_info=True)
            if not handler.advisory:
                sys.exit(1)
        finally:
            if verbose:
                set_console_level(self.global_config["console_log_level"])
