"""
Pytest configuration and fixtures for negotiation tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from negotiation.quality import QualifiedStringValue  # noqa: E402


@pytest.fixture
def client():
    """TestClient bound to a freshly built application."""
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def browser_accept():
    """Accept values in the order a browser would send them."""
    return [
        QualifiedStringValue("*", 0.8),
        QualifiedStringValue("text/plain", 0.8),
        QualifiedStringValue("text/html"),
        QualifiedStringValue("application/json", 0.5),
    ]
