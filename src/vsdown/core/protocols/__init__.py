"""Protocols that core services depend on instead of UI classes."""

from .progress import NullProgressReporter, ProgressReporter

__all__ = ["NullProgressReporter", "ProgressReporter"]
