"""Menu tree model and builder

A menu is a grid of inline buttons. Every button gets a callback payload
derived from the menu id and its grid position (see ``path_codec``), and the
handlers passed when the button is added run whenever that payload comes back
from Telegram. Menus nest through ``sub_menu``, which also wires up the
navigation buttons.
"""

import weakref
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional, Union

from . import config
from .exceptions import ConfigurationError, OverwriteConflict
from .path_codec import SEPARATOR, encode_path

# handler(context, menu) where menu is the MenuNavigation of the current press
MenuHandler = Callable[..., Union[Awaitable[None], None]]


@dataclass(frozen=True)
class MenuButton:
    """Inline button of a menu"""

    label: str
    path: str

    def to_dict(self) -> dict:
        """Wire representation of the button"""
        return {"label": self.label, "opaque_data": self.path}


class Menu:
    """Inline keyboard menu that can be nested into a menu tree"""

    def __init__(self, menu_id: str, auto_answer: Optional[bool] = None):
        if SEPARATOR in menu_id:
            raise ConfigurationError(
                f"You cannot use '{SEPARATOR}' in a menu identifier ('{menu_id}')"
            )
        self._id = menu_id
        self._auto_answer = (
            config.MENU_AUTO_ANSWER if auto_answer is None else auto_answer
        )
        self._rows: List[List[MenuButton]] = [[]]
        self._handlers: Dict[str, List[MenuHandler]] = {}
        self._parent: Optional[weakref.ref] = None
        self._children: Dict[str, "Menu"] = {}

    def __repr__(self) -> str:
        return f"Menu({self._id!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def auto_answer(self) -> bool:
        return self._auto_answer

    @property
    def parent(self) -> Optional["Menu"]:
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> Dict[str, "Menu"]:
        return dict(self._children)

    @property
    def keyboard(self) -> List[List[MenuButton]]:
        """Snapshot of the button grid, one list per row"""
        return [list(row) for row in self._rows]

    @property
    def paths(self) -> List[str]:
        return list(self._handlers)

    def handlers_for(self, path: str) -> Optional[List[MenuHandler]]:
        """Handlers registered for a payload on this menu, if any"""
        handlers = self._handlers.get(path)
        return list(handlers) if handlers is not None else None

    def row(self) -> "Menu":
        """Start a new row of buttons"""
        self._rows.append([])
        return self

    def text(self, label: str, *handlers: MenuHandler) -> "Menu":
        """Add a button that runs the given handlers in order"""
        path = self._next_path()
        self._rows[-1].append(MenuButton(label, path))
        self._handlers[path] = list(handlers)
        return self

    def sub_menu(
        self,
        label: str,
        menu: "Menu",
        no_back_button: bool = False,
        on_action: Optional[MenuHandler] = None,
    ) -> "Menu":
        """Add a button that opens another menu"""
        if not no_back_button:
            existing_parent = menu.parent
            if existing_parent is not None and existing_parent is not self:
                raise OverwriteConflict(
                    f"Cannot add the menu '{menu.id}' to '{self._id}' because it "
                    f"is already added to '{existing_parent.id}' and doing so "
                    f"would overwrite where the back button returns to! You can "
                    f"call 'sub_menu' with 'no_back_button=True' to specify that "
                    f"a back button should not be provided."
                )
            menu._parent = weakref.ref(self)
        self._children[menu.id] = menu

        target_id = menu.id

        async def open_sub_menu(context, navigation):
            await navigation.nav(target_id)

        handlers = [] if on_action is None else [on_action]
        return self.text(label, *handlers, open_sub_menu)

    def back(self, label: str, on_action: Optional[MenuHandler] = None) -> "Menu":
        """Add a button that returns to the parent menu"""

        async def go_back(context, navigation):
            await navigation.back()

        handlers = [] if on_action is None else [on_action]
        return self.text(label, *handlers, go_back)

    def _next_path(self) -> str:
        row = len(self._rows) - 1
        col = len(self._rows[row])
        return encode_path(self._id, row, col)
