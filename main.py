#!/usr/bin/env python3
"""telemenu demo bot

Shows a small settings menu tree. Send /start to the bot to open it.
"""

import asyncio
import logging
import sys
import traceback

from telemenu.core import config
from telemenu.core.bot_manager import BotManager
from telemenu.core.exceptions import ConfigurationError
from telemenu.core.menu import Menu

# Configure logging
config.LOG_DIR.mkdir(exist_ok=True)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format=config.LOG_FORMAT,
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(config.LOG_DIR / "telemenu.log", encoding="utf-8"),
    ],
)

# Suppress noisy third-party logs
logging.getLogger("telethon").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def build_menu() -> Menu:
    """Main menu with a settings submenu and an about page"""
    state = {"notifications": True}

    async def toggle_notifications(context, menu):
        state["notifications"] = not state["notifications"]
        status = "on" if state["notifications"] else "off"
        await context.event.answer(f"Notifications {status}")

    async def show_about(context, menu):
        await context.event.answer("telemenu demo bot", alert=True)

    # Buttons in these menus answer the query themselves
    notifications = Menu("notifications", auto_answer=False)
    notifications.text("Toggle", toggle_notifications).row().back(
        "Back", on_action=lambda context, menu: context.answer()
    )

    settings = Menu("settings")
    settings.sub_menu("Notifications", notifications).row().back("Back")

    about = Menu("about", auto_answer=False)
    about.text("Show info", show_about).row().back(
        "Back", on_action=lambda context, menu: context.answer()
    )

    main_menu = Menu("main")
    main_menu.sub_menu("Settings", settings)
    main_menu.sub_menu("About", about)
    main_menu.row().text("Close", lambda context, menu: context.event.delete())
    return main_menu


async def main() -> None:
    """Main application entry point"""
    try:
        async with BotManager(build_menu(), "Welcome! Pick an option:") as manager:
            print("\nBot is running! Press Ctrl+C to stop.\n")
            await manager.run()

    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"\nConfiguration error: {e}")
        print("Ensure config/.env exists, see config/.env.example")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Fatal error: {e}")
        logger.error(traceback.format_exc())
        print(f"\nFatal error occurred: {e}")
        print(f"Check {config.LOG_DIR / 'telemenu.log'} for details")
        sys.exit(1)

    finally:
        logger.info("telemenu shutdown complete")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nGoodbye!")
        sys.exit(0)
