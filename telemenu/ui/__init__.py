"""telemenu keyboard rendering"""

from .keyboard import to_buttons, to_wire

__all__ = ["to_buttons", "to_wire"]
