"""
Menu Index

Flattens the application menu into a lookup table keyed by command id.
Each entry records the label, display-ready accelerator keys, the chain
of parent menu labels (nearest first) and whether the command is enabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from gitdesk.menu.accelerator import parse_accelerator
from gitdesk.menu.types import Menu

PARENT_MENU_SEPARATOR = " -> "


@dataclass(frozen=True)
class MenuItemInfo:
    """
    Computed information about one menu command.

    Attributes:
        label: Text shown in the application menu
        accelerator_keys: Keyboard shortcut split into display keys;
            Command+Shift+K is three elements
        parent_menu_labels: Labels of the enclosing menus, nearest first
        enabled: Whether the command is currently enabled
    """

    label: str
    accelerator_keys: tuple = ()
    parent_menu_labels: tuple = ()
    enabled: bool = True


MenuIndex = Dict[str, MenuItemInfo]


def _item_accelerator_keys(item, platform: Optional[str]) -> tuple:
    if item.type in ("separator", "submenuItem"):
        return ()
    return parse_accelerator(item.accelerator, platform)


def _index_menu(
    menu: Menu,
    index: MenuIndex,
    parent: Optional[MenuItemInfo],
    platform: Optional[str],
) -> None:
    for item in menu.items:
        if item.type == "separator":
            continue

        info = MenuItemInfo(
            label=item.label,
            accelerator_keys=_item_accelerator_keys(item, platform),
            parent_menu_labels=(
                () if parent is None
                else (parent.label,) + parent.parent_menu_labels
            ),
            enabled=item.enabled,
        )

        # Duplicate ids: the last occurrence wins
        index[item.id] = info

        if item.type == "submenuItem":
            _index_menu(item.menu, index, info, platform)


def build_menu_index(menu: Menu, platform: Optional[str] = None) -> MenuIndex:
    """
    Build a menu index from a menu tree.

    Traversal is depth-first, pre-order: a submenu container is indexed
    before its children. Separators are skipped. Pure and total.

    Args:
        menu: Root menu
        platform: Platform for accelerator symbols (default sys.platform)

    Returns:
        dict mapping command id -> MenuItemInfo
    """
    index: MenuIndex = {}
    _index_menu(menu, index, None, platform)
    return index


def format_parent_menu_label(info: MenuItemInfo) -> str:
    """Join parent menu labels for display, e.g. "Repository -> Branch"."""
    return PARENT_MENU_SEPARATOR.join(info.parent_menu_labels)


class MenuIndexCache:
    """
    Single-entry cache keyed on menu identity.

    Holds the last menu object seen and the index built from it. A
    different menu object (even an equal one) triggers a rebuild; the
    tree is never compared by value.
    """

    def __init__(self, platform: Optional[str] = None):
        self._platform = platform
        self._menu = None
        self._index: Optional[MenuIndex] = None

    def get(self, menu: Optional[Menu]) -> MenuIndex:
        """Return the index for `menu`, rebuilding only when it changed."""
        if self._index is not None and menu is self._menu:
            return self._index

        self._menu = menu
        self._index = {} if menu is None else build_menu_index(menu, self._platform)
        return self._index

    def clear(self) -> None:
        """Drop the cached entry."""
        self._menu = None
        self._index = None
