"""Tests for CLIParser."""

import pytest

from vsdown.cli.parser import CLIParser


@pytest.fixture
def parser() -> CLIParser:
    return CLIParser()


def test_install_defaults(parser: CLIParser) -> None:
    args = parser.parse_args(["install"])

    assert args.command == "install"
    assert args.force is False
    assert args.verbose is False


@pytest.mark.parametrize("flag", ["-f", "--force"])
def test_install_force(parser: CLIParser, flag: str) -> None:
    assert parser.parse_args(["install", flag, "--verbose"]).force is True


@pytest.mark.parametrize("command", ["check", "remove"])
def test_commands_accept_verbose(parser: CLIParser, command: str) -> None:
    args = parser.parse_args([command, "--verbose"])

    assert args.command == command
    assert args.verbose is True


def test_no_command(parser: CLIParser) -> None:
    args = parser.parse_args([])

    assert args.command is None
    assert args.version is False


def test_version_flag(parser: CLIParser) -> None:
    assert parser.parse_args(["--version"]).version is True


def test_force_is_install_only(parser: CLIParser) -> None:
    with pytest.raises(SystemExit):
        parser.parse_args(["check", "--force"])


def test_unknown_command(parser: CLIParser) -> None:
    with pytest.raises(SystemExit):
        parser.parse_args(["upgrade"])
