# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures for GitDesk tests
"""

import os

# Qt widgets need a platform plugin even when nothing is drawn
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from gitdesk.actions.types import (
    AheadBehind,
    Remote,
    RepositorySyncState,
    Tip,
)
from gitdesk.menu.types import Menu, MenuItem, Separator, SubmenuItem


@pytest.fixture
def qapp():
    """Create QApplication instance for Qt tests."""
    from PySide6 import QtWidgets

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def app_menu():
    """A menu resembling the client's application menu."""
    return Menu(
        [
            SubmenuItem(
                id="file",
                label="File",
                menu=Menu(
                    [
                        MenuItem(id="new-repository", label="New repository…", accelerator="CmdOrCtrl+N"),
                        MenuItem(id="create-new-file", label="New file"),
                        Separator(),
                        MenuItem(id="quit", label="Quit", accelerator="CmdOrCtrl+Q"),
                    ]
                ),
            ),
            SubmenuItem(
                id="repository",
                label="Repository",
                menu=Menu(
                    [
                        MenuItem(id="push", label="Push", accelerator="CmdOrCtrl+P"),
                        MenuItem(id="pull", label="Pull", accelerator="CmdOrCtrl+Shift+P"),
                        Separator(),
                        MenuItem(id="view-repository-on-github", label="View on GitHub", accelerator="CmdOrCtrl+Shift+G"),
                        MenuItem(id="open-working-directory", label="Show in Finder", accelerator="CmdOrCtrl+Shift+F"),
                    ]
                ),
            ),
            SubmenuItem(
                id="branch",
                label="Branch",
                menu=Menu(
                    [
                        MenuItem(id="create-pull-request", label="Create pull request", accelerator="CmdOrCtrl+R"),
                        MenuItem(id="toggle-stashed-changes", label="Show stashed changes"),
                    ]
                ),
            ),
        ]
    )


@pytest.fixture
def synced_state():
    """A published, GitHub-hosted feature branch that is in sync."""
    return RepositorySyncState(
        tip=Tip.valid("feature/blankslate", "a1b2c3"),
        remote=Remote(name="origin", url="https://github.com/octo/desk.git"),
        ahead_behind=AheadBehind(ahead=0, behind=0),
        default_branch_name="main",
        is_github_hosted=True,
    )
