"""Callback context handed to menu handlers"""

from typing import List


class CallbackContext:
    """A single button press as seen by the menu router

    Transports subclass this and implement ``edit_keyboard`` and ``answer``.
    While handlers run, ``menu`` holds the navigation object of the press.
    """

    def __init__(self, payload: str):
        self.payload = payload
        self.menu = None

    async def edit_keyboard(self, grid: List[list]):
        """Replace the buttons of the message the press came from"""
        raise NotImplementedError

    async def answer(self):
        """Tell the client the press was received"""
        raise NotImplementedError
