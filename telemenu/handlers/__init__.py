"""telemenu handlers"""

from .callback_handler import MenuCallbackHandler, TelethonCallbackContext

__all__ = ["MenuCallbackHandler", "TelethonCallbackContext"]
