"""Shared fixtures for menu tests"""

from unittest.mock import AsyncMock

import pytest

from telemenu.core.context import CallbackContext


class FakeContext(CallbackContext):
    """Callback context recording transport calls"""

    def __init__(self, payload: str):
        super().__init__(payload)
        self.edit_keyboard = AsyncMock()
        self.answer = AsyncMock()

    @property
    def rendered(self):
        """Grid passed to the last keyboard edit"""
        return self.edit_keyboard.await_args.args[0]


@pytest.fixture
def make_context():
    return FakeContext
