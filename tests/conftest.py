"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest
from loguru import logger

from hyperdoc.document import Resource

BASE_URI = "https://example.com/teams/7"


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo sink changes made by the CLI during a test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def base_uri() -> str:
    """Provide the URI the sample documents were retrieved from."""
    return BASE_URI


@pytest.fixture
def team_json() -> dict:
    """Provide a document that exercises every way of expressing relations."""
    return {
        "@link": BASE_URI,
        "@type": "Team",
        "name": "Platform",
        "lead": {
            "@link": "https://example.com/employees/123",
            "name": "John",
            "manager": "https://example.com/employees/1",
        },
        "members": [
            {"@link": "https://example.com/employees/5", "@relations": ["member"]},
            {"@link": "https://example.com/employees/6", "@relations": ["member"]},
        ],
        "parent": "https://example.com/departments/2",
        "@description": {"parent": "https://example.com/ignored"},
    }


@pytest.fixture
def team(team_json: dict, base_uri: str) -> Resource:
    """Provide the sample team document as a root resource."""
    return Resource(team_json, base_uri)


@pytest.fixture
def team_file(tmp_path: Path, team_json: dict) -> Path:
    """Write the sample team document to a temporary file."""
    path = tmp_path / "team.json"
    path.write_text(json.dumps(team_json), encoding="utf-8")
    return path
