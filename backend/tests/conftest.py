from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest


_BACKEND = Path(__file__).resolve().parents[1]
if str(_BACKEND) not in sys.path:
    sys.path.insert(0, str(_BACKEND))


def make_completion(*contents: str | None) -> SimpleNamespace:
    """Build an object shaped like a LiteLLM ModelResponse."""
    return SimpleNamespace(
        choices=[
            SimpleNamespace(message=SimpleNamespace(role="assistant", content=c))
            for c in contents
        ],
        usage=None,
    )


class FakeGateway:
    """Stands in for OpenRouterGateway; records prompts, replies with canned text."""

    def __init__(self, reply: str = "{}", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, message, *, model_key="gpt-3.5-turbo"):
        self.calls.append((message, model_key))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_gateway():
    return FakeGateway


@pytest.fixture
def completion():
    return make_completion
