"""Shared test fixtures for the adobe_scripts test suite."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from adobe_scripts.script_modules.types import AutomationConfig

if TYPE_CHECKING:
    from pathlib import Path
    from unittest.mock import MagicMock


@pytest.fixture
def script_dirs(tmp_path: Path) -> dict[str, Path]:
    """Create empty custom, built-in and Adobe scripts directories."""
    dirs = {
        "js_path": tmp_path / "custom",
        "builtin_scripts_path": tmp_path / "builtin",
        "adobe_scripts_path": tmp_path / "adobe",
    }
    for path in dirs.values():
        path.mkdir()
    return dirs


@pytest.fixture
def photoshop_config(script_dirs: dict[str, Path]) -> AutomationConfig:
    """Return a Photoshop config rooted in temporary directories."""
    return AutomationConfig(
        app="photoshop",
        host="127.0.0.1",
        port=8090,
        **script_dirs,
    )


@pytest.fixture
def animate_config(script_dirs: dict[str, Path]) -> AutomationConfig:
    """Return an Animate config rooted in temporary directories."""
    return AutomationConfig(
        app="animate",
        host="127.0.0.1",
        port=8090,
        **script_dirs,
    )


@pytest.fixture
def mock_stderr(mocker: MagicMock) -> MagicMock:
    """Silence and capture diagnostics written through io_ops."""
    return mocker.patch(  # type: ignore[no-any-return]
        "adobe_scripts.script_modules.io_ops.write_stderr",
    )
