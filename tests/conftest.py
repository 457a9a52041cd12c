from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def fake_fs():
    """Storage double: every method is an AsyncMock, nothing touches disk."""
    fs = AsyncMock()
    fs.exists.return_value = False
    fs.read_file.return_value = "[]"
    return fs


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point RECORD_STORE_DATA_DIR at a temp directory."""
    d = tmp_path / "data"
    monkeypatch.setenv("RECORD_STORE_DATA_DIR", str(d))
    return d
