"""Navigation between menus of a tree"""

from .exceptions import NoParent, UnknownDestination
from ..utils.logger import get_logger

logger = get_logger(__name__)


class MenuNavigation:
    """Moves the displayed keyboard relative to the menu that was pressed"""

    def __init__(self, menu, context):
        self.menu = menu
        self.context = context

    async def nav(self, to: str):
        """Show the submenu with the given id"""
        if to == self.menu.id:
            return
        target = self.menu.children.get(to)
        if target is None:
            raise UnknownDestination(
                f"Cannot navigate from '{self.menu.id}' to unknown menu '{to}'!"
            )
        logger.info("Navigating to submenu", source=self.menu.id, target=to)
        await self.context.edit_keyboard(target.keyboard)

    async def back(self):
        """Show the parent menu"""
        parent = self.menu.parent
        if parent is None:
            raise NoParent(
                f"Cannot navigate back from menu '{self.menu.id}', no known parent!"
            )
        logger.info("Navigating back", source=self.menu.id, target=parent.id)
        await self.context.edit_keyboard(parent.keyboard)
