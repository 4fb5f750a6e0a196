"""telemenu - nested inline keyboard menus for Telethon bots"""

__version__ = "1.0.0"

from .core.exceptions import (
    ConfigurationError,
    InvalidPath,
    MenuError,
    NoParent,
    OverwriteConflict,
    PathTooLong,
    ReentrancyViolation,
    UnknownDestination,
)
from .core.menu import Menu, MenuButton
from .core.navigation import MenuNavigation
from .core.router import MenuRouter
from .handlers.callback_handler import MenuCallbackHandler

__all__ = [
    "Menu",
    "MenuButton",
    "MenuNavigation",
    "MenuRouter",
    "MenuCallbackHandler",
    "MenuError",
    "ConfigurationError",
    "PathTooLong",
    "InvalidPath",
    "OverwriteConflict",
    "UnknownDestination",
    "NoParent",
    "ReentrancyViolation",
]
