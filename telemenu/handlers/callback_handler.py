"""Telethon wiring for menu trees"""

import logging
from typing import List, Optional

from telethon import events

from ..core.context import CallbackContext
from ..core.exceptions import InvalidPath, MenuError
from ..core.menu import Menu
from ..core.path_codec import decode_path
from ..core.router import MenuRouter
from ..ui.keyboard import to_buttons

logger = logging.getLogger(__name__)


class TelethonCallbackContext(CallbackContext):
    """Callback context backed by a Telethon callback query event"""

    def __init__(self, event, payload: str):
        super().__init__(payload)
        self.event = event

    async def edit_keyboard(self, grid: List[list]):
        await self.event.edit(buttons=to_buttons(grid))

    async def answer(self):
        await self.event.answer()


class MenuCallbackHandler:
    """Routes inline button presses of a menu tree"""

    def __init__(self, bot, menu: Menu):
        self.bot = bot
        self.router = MenuRouter(menu)
        self._callback_handler = None

    def register(self):
        """Start listening for callback queries"""
        self.unregister()

        async def callback_handler(event):
            if not event.data:
                return
            try:
                payload = event.data.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug(f"Ignoring non UTF-8 callback from {event.sender_id}")
                return

            context = TelethonCallbackContext(event, payload)
            try:
                handled = await self.router.dispatch(context)
            except MenuError as e:
                logger.error(f"Menu error for callback {payload}: {e}")
                raise
            if not handled:
                self._log_unhandled(payload)

        self.bot.add_event_handler(callback_handler, events.CallbackQuery)
        self._callback_handler = callback_handler
        logger.info(f"Menu '{self.router.root.id}' registered")

    def _log_unhandled(self, payload: str):
        try:
            menu_id, row, col = decode_path(payload)
        except InvalidPath:
            logger.debug(f"Callback {payload!r} is not a menu button")
            return
        logger.debug(
            f"No button at row {row}, column {col} of menu '{menu_id}' "
            f"under '{self.router.root.id}'"
        )

    def unregister(self):
        """Stop listening for callback queries"""
        if self._callback_handler is not None:
            self.bot.remove_event_handler(self._callback_handler, events.CallbackQuery)
            self._callback_handler = None

    async def send_menu(self, chat, text: str, menu: Optional[Menu] = None):
        """Send a new message showing a menu, the root menu by default"""
        menu = menu or self.router.root
        return await self.bot.send_message(chat, text, buttons=to_buttons(menu.keyboard))
