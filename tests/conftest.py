"""Pytest configuration helpers.

Puts the project root on ``sys.path`` so ``core`` and ``tools`` import the
same way whether or not the project is installed, and provides a fake
backend that stands in for Gemini.
"""
import asyncio
import os
import sys

import pytest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.models import BackendResult  # noqa: E402


class FakeBackend:
    """Records every prompt and answers with a canned BackendResult.

    ``reply`` may be a BackendResult, a callable taking the prompt, or an
    exception instance to raise.
    """

    def __init__(self, reply=None, delay: float = 0.0):
        self.reply = reply if reply is not None else BackendResult.success("I. Introduction")
        self.delay = delay
        self.prompts = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str) -> BackendResult:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(self.reply, BaseException):
            raise self.reply
        if callable(self.reply):
            return self.reply(prompt)
        return self.reply


@pytest.fixture
def fake_backend():
    return FakeBackend()
