"""Command handlers for the vsdown CLI."""

from .base import BaseCommandHandler
from .check import CheckHandler
from .install import InstallHandler
from .remove import RemoveHandler

__all__ = [
    "BaseCommandHandler",
    "CheckHandler",
    "InstallHandler",
    "RemoveHandler",
]
