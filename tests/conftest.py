"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Make the package importable without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from RVmail.outlook import MailClient

GRAPH_BASE = "https://graph.example.test/v1.0"

CONFIG_VARS = (
    "TENANT_ID",
    "CLIENT_ID",
    "CLIENT_SECRET",
    "GRAPH_BASE",
    "GRAPH_TIMEOUT",
    "ADDRESS_SPLIT_STRATEGY",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every RVmail config variable for the duration of a test."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    # load_dotenv writes to os.environ directly
    for name in CONFIG_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def conn():
    """Stand-in for GraphConnection: only graph_base and graph_request are used."""
    c = Mock()
    c.graph_base = GRAPH_BASE
    return c


@pytest.fixture
def client(conn):
    return MailClient(conn)
