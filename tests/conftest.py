"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def sample_html():
    """Sample HTML for testing."""
    return "<strong>A</strong>: <code>B</code>"


@pytest.fixture
def sample_rich_html():
    """Tags, entities and colons mixed together."""
    return '<p class="note">Tom &amp; Jerry&#39;s note: see <a href="http://x.io/?a=1&amp;b=2">link</a>&#x2014;done</p>'
