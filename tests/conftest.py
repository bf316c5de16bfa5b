"""Test configuration and global fixtures for nccfg tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from pathlib import Path
from unittest.mock import Mock

import pytest

from nccfg.config.auth import AuthSettings
from nccfg.session import ClientConfigContext


class FakeHistory:
    """History backend keeping lines in memory like a line editor would."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.reads = []
        self.writes = []

    def read(self, path):
        self.reads.append(path)
        self.lines.extend(Path(path).read_text(encoding="utf-8").splitlines())

    def write(self, path):
        self.writes.append(path)
        Path(path).write_text("".join(f"{line}\n" for line in self.lines), encoding="utf-8")


@pytest.fixture(autouse=True)
def config_home(monkeypatch, tmp_path):
    """Point HOME at a temporary directory with no directory override."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("NETCONF_CLIENT_DIR", raising=False)
    monkeypatch.delenv("NCCFG_LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def config_dir(config_home):
    """The default configuration directory (not created)."""
    return config_home / ".netconf_client"


@pytest.fixture
def write_config(config_dir):
    """Factory writing config.xml content into the configuration directory."""

    def _write(content: str) -> Path:
        config_dir.mkdir(exist_ok=True)
        path = config_dir / "config.xml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def history():
    return FakeHistory()


@pytest.fixture
def context(history):
    """A context with in-memory history and authentication backends."""
    return ClientConfigContext(auth=AuthSettings(), history=history)


@pytest.fixture
def mock_auth():
    """Authentication backend recording every forwarded call."""
    return Mock(spec=["set_preference", "set_keypair"])
