"""Bot manager - runs a menu tree on a Telegram bot"""

import logging

from telethon import TelegramClient, events

from ..handlers.callback_handler import MenuCallbackHandler
from . import config
from .menu import Menu

logger = logging.getLogger(__name__)


class BotManager:
    """Bot lifecycle around a single menu tree"""

    def __init__(self, menu: Menu, welcome_text: str = "Choose an option:"):
        config.validate_bot_credentials()
        self.bot = TelegramClient(config.SESSION_NAME, config.API_ID, config.API_HASH)
        self.menu_handler = MenuCallbackHandler(self.bot, menu)
        self.welcome_text = welcome_text
        self._start_handler = None

    async def __aenter__(self):
        await self.start_bot()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

    async def start_bot(self):
        """Log in and install the menu handlers"""
        try:
            await self.bot.start(bot_token=config.BOT_TOKEN)
            self._setup_handlers()
            logger.info("Menu bot started")
        except Exception as e:
            logger.error(f"Bot startup failed: {e}")
            raise

    def _setup_handlers(self):
        self.menu_handler.register()

        async def start_handler(event):
            await self.menu_handler.send_menu(event.chat_id, self.welcome_text)

        self.bot.add_event_handler(start_handler, events.NewMessage(pattern=r"^/start$"))
        self._start_handler = start_handler

    async def cleanup(self):
        """Clean up resources"""
        logger.info("Starting cleanup...")
        self.menu_handler.unregister()
        if self._start_handler is not None:
            self.bot.remove_event_handler(self._start_handler)
            self._start_handler = None
        if self.bot.is_connected():
            await self.bot.disconnect()
        logger.info("Cleanup completed")

    async def run(self):
        """Main bot runner"""
        logger.info("Menu bot is running...")
        await self.bot.run_until_disconnected()
