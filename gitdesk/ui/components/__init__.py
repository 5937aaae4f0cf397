"""
UI Components Package

- BaseWidget: shared helpers for panel components
- NoChangesWidget: the "No local changes" blankslate
"""

from gitdesk.ui.components.base_widget import BaseWidget
from gitdesk.ui.components.no_changes_widget import NoChangesWidget

__all__ = [
    "BaseWidget",
    "NoChangesWidget",
]
