"""Core telemenu components"""

from .context import CallbackContext
from .exceptions import *
from .menu import Menu, MenuButton
from .navigation import MenuNavigation
from .path_codec import MAX_PAYLOAD_BYTES, decode_path, encode_path
from .router import MenuRouter

__all__ = [
    "CallbackContext",
    "Menu",
    "MenuButton",
    "MenuNavigation",
    "MenuRouter",
    "MAX_PAYLOAD_BYTES",
    "decode_path",
    "encode_path",
]
