"""Pytest configuration and fixtures for vsdown tests."""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

# Keep test runs out of the real log file; must happen before vsdown
# modules create their loggers.
os.environ.setdefault(
    "VSDOWN_LOG_DIR", str(Path(tempfile.gettempdir()) / "vsdown-test-logs")
)

import pytest  # noqa: E402

from tests.helpers import InMemoryVersionStore  # noqa: E402
from vsdown.core.layout import InstallLayout  # noqa: E402
from vsdown.core.manifest import InstallManifest, ManifestEntry  # noqa: E402


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees records from vsdown loggers.

    The root 'vsdown' logger is created with propagate=False in
    production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("vsdown"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def layout(tmp_path: Path) -> InstallLayout:
    """Install layout rooted in a temporary directory."""
    return InstallLayout(
        lib_dir=tmp_path / "usr" / "lib",
        bin_dir=tmp_path / "usr" / "bin",
        share_dir=tmp_path / "usr" / "share",
        state_dir=tmp_path / "var" / "lib" / "vsdown",
    )


@pytest.fixture
def manifest(layout: InstallLayout) -> InstallManifest:
    """Small manifest with fixture bytes instead of real assets."""
    share = layout.share_dir
    return InstallManifest(
        [
            ManifestEntry(share / "applications" / "code.desktop", b"desktop"),
            ManifestEntry(share / "appdata" / "code.appdata.xml", b"<xml/>"),
            ManifestEntry(share / "pixmaps" / "code.png", b"\x89PNG"),
        ]
    )


@pytest.fixture
def memory_store() -> InMemoryVersionStore:
    return InMemoryVersionStore()


@pytest.fixture
def mock_session() -> MagicMock:
    """Mock aiohttp.ClientSession; set ``get.return_value`` per test."""
    return MagicMock()
