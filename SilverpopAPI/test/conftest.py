"""Pytest fixtures for SilverpopAPI tests."""

from unittest.mock import MagicMock

import pytest
from zeep import Transport

from SilverpopAPI.test.fakes import LOGIN_OK, make_response


@pytest.fixture
def transport():
    """zeep Transport mock answering every POST with a successful login."""
    mock = MagicMock(spec=Transport)
    mock.post.return_value = make_response(LOGIN_OK)
    return mock
