"""Configuration settings for telemenu"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Load environment variables from config directory
env_path = Path(__file__).parent.parent.parent / "config" / ".env"
load_dotenv(env_path)

# Telegram API Configuration
API_ID = os.getenv("API_ID")
API_HASH = os.getenv("API_HASH")
BOT_TOKEN = os.getenv("BOT_TOKEN")
SESSION_NAME = os.getenv("SESSION_NAME", "telemenu_bot")

# Convert API_ID to int and validate
try:
    API_ID = int(API_ID) if API_ID else None
except (ValueError, TypeError):
    logger.warning("API_ID is not a number, ignoring it")
    API_ID = None

# Menu Settings
MENU_AUTO_ANSWER = os.getenv("MENU_AUTO_ANSWER", "true").lower() == "true"

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s | %(name)-20s | %(levelname)-8s | %(message)s"
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))


def validate_bot_credentials():
    """Make sure the bot runner has everything it needs to log in"""
    missing = []
    if not API_ID:
        missing.append("API_ID")
    if not API_HASH:
        missing.append("API_HASH")
    if not BOT_TOKEN:
        missing.append("BOT_TOKEN")
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )
