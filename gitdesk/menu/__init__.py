"""
GitDesk Menu Module

Menu tree model and the flattened, queryable menu index used to
cross-reference blankslate actions with their menu commands.
No Qt dependency outside of qt_menu.
"""

from gitdesk.menu.types import Menu, MenuItem, Separator, SubmenuItem
from gitdesk.menu.accelerator import (
    format_accelerator,
    get_platform_specific_name_or_symbol_for_modifier,
)
from gitdesk.menu.index import (
    MenuIndex,
    MenuIndexCache,
    MenuItemInfo,
    build_menu_index,
    format_parent_menu_label,
)

__all__ = [
    "Menu",
    "MenuItem",
    "Separator",
    "SubmenuItem",
    "format_accelerator",
    "get_platform_specific_name_or_symbol_for_modifier",
    "MenuIndex",
    "MenuIndexCache",
    "MenuItemInfo",
    "build_menu_index",
    "format_parent_menu_label",
]
