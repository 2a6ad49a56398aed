"""Shared fixtures for concordance tests."""

import pytest


@pytest.fixture
def write_doc(tmp_path):
    """Write text (or bytes) to a file under tmp_path and return its path."""

    def _write(content, name="doc.txt"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
