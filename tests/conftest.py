# tests/conftest.py
import logging
import os
from unittest.mock import MagicMock

import pytest

from devsetup.config_models import AppSettings
from devsetup.setup_context import SetupContext


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep DEVSETUP_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("DEVSETUP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def app_settings(tmp_path):
    """AppSettings rooted in a temporary project directory."""
    return AppSettings(project_root=tmp_path)


@pytest.fixture
def setup_context(tmp_path):
    return SetupContext(project_root=tmp_path, package_manager="npm")


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)
