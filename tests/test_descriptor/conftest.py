"""Shared fixtures for plugin description tests."""

from pathlib import Path

import pytest


@pytest.fixture
def minimal_doc():
    return {"name": "Foo", "version": "1.0", "main": "com.example.Main"}


@pytest.fixture
def tmp_yaml(tmp_path):
    """Create a temporary YAML file."""

    def _create(content: str, filename: str = "plugin.yml") -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _create
