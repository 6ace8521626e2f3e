"""
Shared fixtures for the Bookbot tests.
"""

import sys
import unittest.mock
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def books_client():
    """A book client double with both search methods returning no results."""
    client = unittest.mock.MagicMock()
    client.search_by_title.return_value = []
    client.search_by_author.return_value = []
    return client
