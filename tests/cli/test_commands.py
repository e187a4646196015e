"""Tests for the install, check and remove command handlers."""

import logging
from argparse import Namespace
from contextlib import asynccontextmanager
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tests.helpers import InMemoryVersionStore
from vsdown.cli.commands import CheckHandler, InstallHandler, RemoveHandler
from vsdown.config import ConfigManager
from vsdown.core.layout import InstallLayout
from vsdown.core.manifest import InstallManifest
from vsdown.core.version import OutOfDate, UpToDate
from vsdown.types import GlobalConfig


@asynccontextmanager
async def fake_session(global_config):
    yield MagicMock()


@pytest.fixture
def global_config(layout: InstallLayout) -> GlobalConfig:
    return {
        "log_level": "INFO",
        "console_log_level": "INFO",
        "network": {"timeout_seconds": 10},
        "directory": {
            "lib": layout.lib_dir,
            "bin": layout.bin_dir,
            "share": layout.share_dir,
            "state": layout.state_dir,
        },
    }


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    return ConfigManager(tmp_path / "missing.conf")


def make_oracle(result: UpToDate | OutOfDate) -> MagicMock:
    oracle = MagicMock()
    oracle.check_up_to_date = AsyncMock(return_value=result)
    return oracle


class TestCheckHandler:
    """Tests for the check command."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (UpToDate("1.95.3"), "✅ Your VSCode version is latest! (1.95.3)"),
            (
                OutOfDate(local="None", remote="1.95.3"),
                "Different/newer Visual Studio Code version found. "
                "Current version: None, latest available version: 1.95.3.",
            ),
        ],
    )
    async def test_reports_result(
        self,
        config_manager: ConfigManager,
        global_config: GlobalConfig,
        caplog: pytest.LogCaptureFixture,
        result: UpToDate | OutOfDate,
        expected: str,
    ) -> None:
        handler = CheckHandler(config_manager, global_config)

        with (
            patch(
                "vsdown.cli.commands.check.create_http_session", fake_session
            ),
            patch.object(
                handler, "_create_oracle", return_value=make_oracle(result)
            ),
            caplog.at_level(logging.INFO),
        ):
            await handler.execute(Namespace())

        assert expected in caplog.messages


class TestInstallHandler:
    """Tests for the install command."""

    @staticmethod
    async def execute(
        handler: InstallHandler,
        oracle: MagicMock,
        force: bool = False,
    ) -> tuple[MagicMock, MagicMock]:
        """Run the handler with a mocked session and installer."""
        installer = MagicMock()
        installer.install_latest = AsyncMock()
        with (
            patch(
                "vsdown.cli.commands.install.create_http_session", fake_session
            ),
            patch.object(handler, "_create_oracle", return_value=oracle),
            patch.object(
                handler, "_create_installer", return_value=installer
            ) as create_installer,
        ):
            await handler.execute(Namespace(force=force))
        return installer, create_installer

    @pytest.mark.asyncio
    async def test_up_to_date_skips_install(
        self,
        config_manager: ConfigManager,
        global_config: GlobalConfig,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        handler = InstallHandler(config_manager, global_config)

        with caplog.at_level(logging.INFO):
            installer, create_installer = await self.execute(
                handler, make_oracle(UpToDate("1.95.3"))
            )

        create_installer.assert_not_called()
        installer.install_latest.assert_not_awaited()
        assert "✅ Your VSCode version is latest! (1.95.3)" in caplog.messages

    @pytest.mark.asyncio
    async def test_out_of_date_installs(
        self, config_manager: ConfigManager, global_config: GlobalConfig
    ) -> None:
        handler = InstallHandler(config_manager, global_config)

        installer, _ = await self.execute(
            handler, make_oracle(OutOfDate(local="1.94.0", remote="1.95.3"))
        )

        installer.install_latest.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_force_skips_version_check(
        self, config_manager: ConfigManager, global_config: GlobalConfig
    ) -> None:
        handler = InstallHandler(config_manager, global_config)
        oracle = make_oracle(UpToDate("1.95.3"))

        installer, _ = await self.execute(handler, oracle, force=True)

        oracle.check_up_to_date.assert_not_awaited()
        installer.install_latest.assert_awaited_once()


class TestRemoveHandler:
    """Tests for the remove command."""

    @pytest.mark.asyncio
    async def test_removes_installed_release(
        self,
        config_manager: ConfigManager,
        global_config: GlobalConfig,
        layout: InstallLayout,
        manifest: InstallManifest,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        layout.install_dir.mkdir(parents=True)
        layout.executable.write_bytes(b"binary")
        layout.bin_dir.mkdir(parents=True)
        layout.binary_link.symlink_to(layout.executable)
        manifest.install()
        store = InMemoryVersionStore("1.95.3")
        handler = RemoveHandler(
            config_manager, global_config, store=store, manifest=manifest
        )

        with (
            patch(
                "vsdown.cli.commands.remove.create_http_session", fake_session
            ),
            caplog.at_level(logging.INFO),
        ):
            await handler.execute(Namespace())

        assert not layout.install_dir.exists()
        assert not layout.binary_link.is_symlink()
        assert store.content is None
        assert f"✅ Removed {layout.install_dir}" in caplog.messages

    @pytest.mark.asyncio
    async def test_nothing_installed(
        self,
        config_manager: ConfigManager,
        global_config: GlobalConfig,
        manifest: InstallManifest,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        handler = RemoveHandler(config_manager, global_config, manifest=manifest)

        with (
            patch(
                "vsdown.cli.commands.remove.create_http_session", fake_session
            ),
            caplog.at_level(logging.INFO),
        ):
            await handler.execute(Namespace())

        assert (
            "Nothing to remove, Visual Studio Code is not installed"
            in caplog.messages
        )


def test_handler_builds_layout_from_config(
    config_manager: ConfigManager,
    global_config: GlobalConfig,
    layout: InstallLayout,
) -> None:
    handler = CheckHandler(config_manager, global_config)

    assert handler.layout == layout
    assert handler.store.path == layout.version_file
    assert len(handler.manifest.entries) == 5
