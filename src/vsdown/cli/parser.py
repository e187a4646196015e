"""CLI argument parser for vsdown."""

import argparse
from argparse import Namespace
from collections.abc import Sequence


class CLIParser:
    """Command-line argument parser for vsdown."""

    def __init__(self) -> None:
        self.parser = self._create_main_parser()
        self._add_global_options(self.parser)
        self._add_subcommands(self.parser)

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; sys.argv[1:] when None

        Returns:
            Namespace: Parsed arguments namespace.

        """
        return self.parser.parse_args(argv)

    def print_help(self) -> None:
        self.parser.print_help()

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="vsdown",
            description="Visual Studio Code release installer",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s check              # Compare installed and latest version
  %(prog)s install            # Install when a newer release exists
  %(prog)s install --force    # Reinstall the latest release
  %(prog)s remove             # Uninstall everything vsdown installed
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show vsdown version and exit",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        install_parser = subparsers.add_parser(
            "install", help="Install Visual Studio Code"
        )
        install_parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Install even if the recorded version is the latest",
        )
        self._add_verbose(install_parser)

        check_parser = subparsers.add_parser(
            "check", help="Check Visual Studio Code update"
        )
        self._add_verbose(check_parser)

        remove_parser = subparsers.add_parser(
            "remove", help="Remove Visual Studio Code"
        )
        self._add_verbose(remove_parser)

    @staticmethod
    def _add_verbose(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed logging",
        )
