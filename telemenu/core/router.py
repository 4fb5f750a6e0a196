"""Routes button presses to the handlers of a menu tree"""

import asyncio
import inspect
from typing import List, Optional, Tuple

from .exceptions import ReentrancyViolation
from .menu import Menu, MenuHandler
from .navigation import MenuNavigation
from ..utils.logger import correlation_scope, get_logger

logger = get_logger(__name__)


async def run_handlers(handlers: List[MenuHandler], context, navigation: MenuNavigation):
    """Run handlers one after another, stopping at the first error"""
    for handler in handlers:
        result = handler(context, navigation)
        if inspect.isawaitable(result):
            await result


class MenuRouter:
    """Dispatches callback payloads into a menu tree"""

    def __init__(self, root: Menu):
        self.root = root

    def resolve(self, payload: str) -> Optional[Tuple[Menu, List[MenuHandler]]]:
        """Find the menu owning a payload, depth first"""
        return self._find(self.root, payload, set())

    def _find(self, menu: Menu, payload: str, seen: set):
        if id(menu) in seen:
            return None
        seen.add(id(menu))

        handlers = menu.handlers_for(payload)
        if handlers is not None:
            return menu, handlers

        for child in menu.children.values():
            match = self._find(child, payload, seen)
            if match is not None:
                return match
        return None

    async def dispatch(self, context) -> bool:
        """Handle a button press, returns False if no menu owns it

        The automatic answer runs alongside the handlers and is awaited once
        they finish, so its failure is raised from here. A handler error takes
        precedence over an answer error.
        """
        with correlation_scope():
            match = self.resolve(context.payload)
            if match is None:
                logger.debug("Ignoring unknown payload", payload=context.payload)
                return False

            menu, handlers = match
            if getattr(context, "menu", None) is not None:
                raise ReentrancyViolation(
                    f"Already executing menu handlers, cannot run handlers of '{menu.id}'!"
                )

            logger.info("Menu button pressed", menu=menu.id, payload=context.payload)
            answer = asyncio.ensure_future(context.answer()) if menu.auto_answer else None
            navigation = MenuNavigation(menu, context)
            context.menu = navigation
            try:
                await run_handlers(handlers, context, navigation)
            except Exception:
                if answer is not None:
                    await self._collect_answer(answer)
                raise
            finally:
                context.menu = None

            if answer is not None:
                await answer
            return True

    async def _collect_answer(self, answer: asyncio.Future):
        (result,) = await asyncio.gather(answer, return_exceptions=True)
        if isinstance(result, Exception):
            logger.error("Failed to answer callback query", error=str(result))
