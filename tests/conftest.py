"""
Pytest configuration for shopauth tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from shopauth.services import SubmissionController


class RecordingAlerts:
    """Alert collaborator that records errors and acknowledges on demand."""

    def __init__(self):
        self.messages = []
        self.pending = []

    def present_error(self, message, on_acknowledge):
        self.messages.append(message)
        self.pending.append(on_acknowledge)

    def acknowledge(self):
        self.pending.pop(0)()


@pytest.fixture
def auth():
    mock = MagicMock()
    mock.login = AsyncMock(return_value=None)
    mock.signup = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def navigator():
    return MagicMock()


@pytest.fixture
def alerts():
    return RecordingAlerts()


@pytest.fixture
def controller(auth, navigator, alerts):
    return SubmissionController(auth, navigator, alerts, destination="Shop")
