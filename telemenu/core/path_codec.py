"""Button path encoding for callback payloads"""

from typing import Tuple

from .exceptions import InvalidPath, PathTooLong

# Telegram rejects callback data longer than this
MAX_PAYLOAD_BYTES = 64
SEPARATOR = "/"


def byte_length(text: str) -> int:
    """Size of text once encoded as UTF-8"""
    return len(text.encode("utf-8"))


def encode_path(menu_id: str, row: int, col: int) -> str:
    """Build the callback payload for the button at row/col of a menu"""
    path = f"{menu_id}{SEPARATOR}{row}{SEPARATOR}{col}"
    if byte_length(path) > MAX_PAYLOAD_BYTES:
        raise PathTooLong(
            f"Button path '{path}' would exceed payload size of "
            f"{MAX_PAYLOAD_BYTES} bytes! Please use a shorter identifier "
            f"than '{menu_id}'"
        )
    return path


def decode_path(path: str) -> Tuple[str, int, int]:
    """Split a payload into menu id, row and column"""
    parts = path.split(SEPARATOR)
    if len(parts) != 3:
        raise InvalidPath(f"'{path}' is not a menu button path")
    menu_id, row, col = parts
    if not (row.isdecimal() and col.isdecimal()):
        raise InvalidPath(f"'{path}' is not a menu button path")
    return menu_id, int(row), int(col)
