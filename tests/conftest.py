import tempfile

import pytest


@pytest.fixture
def temp_root(tmp_path, monkeypatch) -> str:
    """Point the OS temp directory at a per-test directory."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return str(root)
