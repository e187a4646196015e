"""Main CLI entry point for vsdown."""

import sys

import uvloop

from vsdown.cli import CLIRunner
from vsdown.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


async def async_main() -> None:
    """Run the CLI asynchronously."""
    logger.debug("CLI started")
    runner = CLIRunner()
    await runner.run()


def main() -> None:
    """Run the CLI application on the uvloop event loop."""
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("\n⏹️  Operation cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)
    finally:
        flush_all_handlers()


if __name__ == "__main__":
    main()
