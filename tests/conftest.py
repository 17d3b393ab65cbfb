"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import os
import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(autouse=True)
def isolate_database_url(monkeypatch):
    """Keep tests off any DATABASE_URL exported in the developer's shell."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("MATCHING_DEADLINE_SECONDS", raising=False)


@pytest.fixture
def sqlite_url(tmp_path):
    """File-backed SQLite URL in a per-test temp directory."""
    return f"sqlite:///{os.path.join(str(tmp_path), 'matching.db')}"
