"""
Qt menu projection.

Builds a Menu tree from a live QMenuBar or QMenu so the blankslate
can be cross-referenced against the application's actual commands.
Action object names are used as command ids.
"""

import re
from typing import Optional

from PySide6 import QtGui

from gitdesk.core import log
from gitdesk.menu.accelerator import ACCELERATOR_SEPARATOR, split_accelerator
from gitdesk.menu.types import Menu, MenuItem, Separator, SubmenuItem


def strip_mnemonic(text: str) -> str:
    """Remove Qt mnemonic markers: "&Repository" -> "Repository", "&&" -> "&"."""
    return re.sub(r"&(.)", r"\1", text)


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def shortcut_to_accelerator(sequence) -> Optional[str]:
    """
    Convert a QKeySequence to "CmdOrCtrl+Shift+K" form.

    Qt's portable "Ctrl" means Command on macOS and Control elsewhere,
    which is exactly CmdOrCtrl. Only the first chord of a multi-chord
    sequence is kept. The "+" key itself is written as "Plus".
    """
    if sequence is None or sequence.isEmpty():
        return None

    text = sequence.toString(QtGui.QKeySequence.SequenceFormat.PortableText)
    first_chord = text.split(", ")[0]
    parts = [
        "CmdOrCtrl" if p == "Ctrl" else p for p in split_accelerator(first_chord)
    ]
    return ACCELERATOR_SEPARATOR.join(parts)


def _action_id(action) -> str:
    name = action.objectName()
    if name:
        return name
    fallback = _slug(strip_mnemonic(action.text()))
    log.debug(f"Menu action has no object name, using '{fallback}'")
    return fallback


def menu_from_qt(widget) -> Menu:
    """
    Project a QMenuBar or QMenu into a Menu tree.

    Args:
        widget: QMenuBar or QMenu whose actions() are walked

    Returns:
        Menu with separators, commands and nested submenus
    """
    items = []
    for action in widget.actions():
        if action.isSeparator():
            items.append(Separator())
            continue

        label = strip_mnemonic(action.text())
        submenu = action.menu()

        if submenu is not None:
            items.append(
                SubmenuItem(
                    id=_action_id(action),
                    label=label,
                    menu=menu_from_qt(submenu),
                    enabled=action.isEnabled(),
                )
            )
            continue

        items.append(
            MenuItem(
                id=_action_id(action),
                label=label,
                enabled=action.isEnabled(),
                accelerator=shortcut_to_accelerator(action.shortcut()),
                type="checkbox" if action.isCheckable() else "menuItem",
            )
        )

    return Menu(items)
