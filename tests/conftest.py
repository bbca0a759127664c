from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from decisiondesk.memory.history import HistoryStore


class InMemoryStore:
    """Dict-backed stand-in for the key-value persistence collaborator."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})
        self.writes = 0

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        self.writes += 1
        return True


def text_message(text):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


def tool_message(business_type):
    return SimpleNamespace(content=[
        SimpleNamespace(type="tool_use", name="record_business_type",
                        input={"businessType": business_type}),
    ])


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def history(memory_store):
    return HistoryStore(memory_store)


@pytest.fixture
def fake_client():
    """Client whose first call classifies and second call returns a briefing."""
    client = MagicMock()
    client.messages.create.side_effect = [
        tool_message("Coffee"),
        text_message("🧭 **Daily Overview** — Solid day.💭 **CEO Thought** — Keep going."),
    ]
    return client
