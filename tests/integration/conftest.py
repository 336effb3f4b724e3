"""Integration test fixtures for running the server as a subprocess."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Environment for a server subprocess: no API key, text logs, isolated HOME."""
    env = {
        key: value
        for key, value in os.environ.items()
        if key != "JINA_API_KEY" and not key.startswith("JINA_READER__")
    }
    env["HOME"] = str(tmp_path)
    env["XDG_CONFIG_HOME"] = str(tmp_path / ".config")
    env["JINA_READER__LOGGING__FORMAT"] = "text"
    return env
