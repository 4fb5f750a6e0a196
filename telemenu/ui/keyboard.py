"""Keyboard rendering for Telethon"""

from typing import List

from telethon import Button


def to_buttons(grid: List[list]) -> List[List[Button]]:
    """Convert a menu grid into Telethon inline button rows"""
    # Telegram rejects empty keyboard rows
    return [
        [Button.inline(button.label, button.path) for button in row]
        for row in grid
        if row
    ]


def to_wire(grid: List[list]) -> List[List[dict]]:
    """Plain dict form of a menu grid"""
    return [[button.to_dict() for button in row] for row in grid]
