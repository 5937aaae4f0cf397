"""
Menu tree types.

Mirrors the application menu as the command-registration subsystem
publishes it: an ordered list of items, where an item is a separator,
a command, or a submenu container holding a nested menu.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Separator:
    """A visual divider. Never indexed."""

    id: Optional[str] = None
    type: str = field(default="separator", init=False)


@dataclass(frozen=True)
class MenuItem:
    """
    A leaf command.

    Attributes:
        id: Stable command identifier (e.g. "push")
        label: Display text
        enabled: Whether the command can currently be invoked
        accelerator: Shortcut in "CmdOrCtrl+Shift+P" form, or None
        type: "menuItem", "checkbox" or "radio"
    """

    id: str
    label: str
    enabled: bool = True
    accelerator: Optional[str] = None
    type: str = "menuItem"


@dataclass(frozen=True)
class SubmenuItem:
    """A container item that opens a nested menu."""

    id: str
    label: str
    menu: "Menu"
    enabled: bool = True
    type: str = field(default="submenuItem", init=False)


AnyMenuItem = Union[Separator, MenuItem, SubmenuItem]


@dataclass(frozen=True)
class Menu:
    """An ordered list of menu items."""

    items: tuple = ()

    def __post_init__(self):
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "items", tuple(self.items))
