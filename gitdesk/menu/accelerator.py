"""
Keyboard accelerator display names.

Accelerators are stored as "+"-separated fragments ("CmdOrCtrl+Shift+P").
Each fragment is rendered with the name or symbol the host platform
uses for it.
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional

ACCELERATOR_SEPARATOR = "+"


def is_mac(platform: Optional[str] = None) -> bool:
    """True when the platform string (default: sys.platform) is macOS."""
    return (platform or sys.platform) == "darwin"


def get_platform_specific_name_or_symbol_for_modifier(
    modifier: str, platform: Optional[str] = None
) -> str:
    """
    Map one accelerator fragment to its platform display form.

    Args:
        modifier: Fragment such as "CmdOrCtrl", "Shift" or "P"
        platform: Platform string, defaults to sys.platform

    Returns:
        Display name or symbol; unknown fragments are returned unchanged
    """
    mac = is_mac(platform)
    key = modifier.lower()

    if key in ("cmdorctrl", "commandorcontrol"):
        return "⌘" if mac else "Ctrl"
    if key in ("ctrl", "control"):
        return "⌃" if mac else "Ctrl"
    if key == "shift":
        return "⇧" if mac else "Shift"
    if key == "alt":
        return "⌥" if mac else "Alt"

    # Mac only
    if key in ("cmd", "command"):
        return "⌘"
    if key == "option":
        return "⌥"

    if key == "plus":
        return "+"

    # Nobody can see a bare space
    if modifier == " ":
        return "Space"

    return modifier


def split_accelerator(accelerator: str) -> list:
    """
    Split an accelerator into fragments.

    A literal "+" key ("CmdOrCtrl++", or "+" alone) becomes the "Plus"
    fragment instead of empty strings.
    """
    if not accelerator:
        return []

    head, _, key = accelerator.rpartition(ACCELERATOR_SEPARATOR)
    if key:
        return accelerator.split(ACCELERATOR_SEPARATOR)

    if head.endswith(ACCELERATOR_SEPARATOR):
        head = head[:-1]
    modifiers = head.split(ACCELERATOR_SEPARATOR) if head else []
    return modifiers + ["Plus"]


def parse_accelerator(accelerator: Optional[str], platform: Optional[str] = None) -> tuple:
    """
    Split an accelerator and map every fragment to its display form.

    Returns an empty tuple when there is no accelerator.
    """
    if not accelerator:
        return ()
    return tuple(
        get_platform_specific_name_or_symbol_for_modifier(part, platform)
        for part in split_accelerator(accelerator)
    )


def format_accelerator(keys: Iterable[str]) -> str:
    """Render already-mapped keys inline, e.g. ("Ctrl", "P") -> "Ctrl+P"."""
    return ACCELERATOR_SEPARATOR.join(keys)
