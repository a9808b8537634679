"""
Shared fixtures: a recording webservice, a mock webservice and builders
wired to them.
"""

import logging
from unittest.mock import Mock

import pytest

from prestashop_webservice_extra import QueryBuilder, RecordingWebservice

SHOP_URL = "https://shop.example.com"


@pytest.fixture
def shop_url():
    """Base URL of the test shop."""
    return SHOP_URL


@pytest.fixture
def webservice():
    """Provide a recording webservice client."""
    return RecordingWebservice()


@pytest.fixture
def builder(webservice):
    """Provide a query builder dispatching to the recording webservice."""
    return QueryBuilder(webservice, SHOP_URL)


@pytest.fixture
def mock_webservice():
    """Provide a Mock webservice client with one method per action."""
    client = Mock(spec=["get", "add", "edit", "delete"])
    client.get.return_value = {"products": []}
    client.add.return_value = {"product": {"id": 1}}
    client.edit.return_value = {"product": {"id": 1}}
    client.delete.return_value = True
    return client


@pytest.fixture
def mock_builder(mock_webservice):
    """Provide a query builder dispatching to the Mock webservice."""
    return QueryBuilder(mock_webservice, SHOP_URL)


@pytest.fixture(autouse=True)
def _restore_builder_log_level():
    """Undo log level changes made by debug-mode builders."""
    builder_logger = logging.getLogger("prestashop_webservice_extra.builder")
    level = builder_logger.level
    yield
    builder_logger.setLevel(level)
