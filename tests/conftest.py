"""
Pytest configuration and shared fixtures.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pytest

from localpass.logger import reset_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test gets its own global logger and a clean package logger."""
    reset_logger()
    yield
    reset_logger()
    package_logger = logging.getLogger("localpass")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def valid_passenger() -> Dict[str, Any]:
    """Valid first class passenger record."""
    return {
        "name": "rahul sharma",
        "from": "dadar",
        "to": "andheri",
        "classType": "first",
    }


@pytest.fixture
def second_class_passenger() -> Dict[str, Any]:
    """Valid second class passenger with mixed-case input."""
    return {
        "name": "Priya",
        "from": "CST",
        "to": "VT",
        "classType": "Second",
    }


@pytest.fixture
def passenger_file(tmp_path, valid_passenger) -> Path:
    """Passenger record written to a JSON file."""
    path = tmp_path / "passenger.json"
    path.write_text(json.dumps(valid_passenger))
    return path


@pytest.fixture
def isolated_env(tmp_path, monkeypatch) -> Path:
    """Run from an empty directory with no localpass settings in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOCALPASS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOCALPASS_LOG_DIR", raising=False)
    return tmp_path
