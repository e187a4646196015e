"""Command-line interface for vsdown."""

from .runner import CLIRunner

__all__ = ["CLIRunner"]
