"""
"No local changes" action selection.

Picks the single primary action to offer when a repository has no
uncommitted changes, plus the fixed secondary actions. Every action is
backed by a menu command: its enabled state drives the button and its
menu location and shortcut drive the discoverability hint.

Pure logic, no Qt.
"""

from __future__ import annotations

import sys
from typing import Optional

from gitdesk.actions import menu_ids
from gitdesk.actions.types import ActionDescriptor, ActionKind, RepositorySyncState
from gitdesk.core import log
from gitdesk.core.feature_flags import FeatureFlags
from gitdesk.menu.accelerator import format_accelerator
from gitdesk.menu.index import MenuIndex, MenuItemInfo, format_parent_menu_label

STASH_DISCOVERABILITY = (
    "When a stash exists, access it at the bottom of the Changes tab to the left."
)


def _lookup(menu_index: MenuIndex, item_id: str) -> Optional[MenuItemInfo]:
    info = menu_index.get(item_id)
    if info is None:
        log.warning(f"Could not find matching menu item for {item_id}")
    return info


def _with_shortcut(text: str, info: MenuItemInfo) -> str:
    if not info.accelerator_keys:
        return text
    return f"{text} or {format_accelerator(info.accelerator_keys)}"


def _menu_location(info: MenuItemInfo) -> str:
    return f"{format_parent_menu_label(info)} menu"


def format_discoverability(info: MenuItemInfo) -> str:
    """
    Describe where a command lives: "Repository -> Branch menu or Ctrl+P".

    The shortcut clause is left out when the command has no accelerator.
    """
    return _with_shortcut(_menu_location(info), info)


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _commit_count(count: int) -> str:
    return "a commit" if count == 1 else f"{count} commits"


def _menu_backed(
    kind: ActionKind,
    item_id: str,
    menu_index: MenuIndex,
    title: str,
    description: str = "",
    button_text: Optional[str] = None,
    discoverability: Optional[str] = None,
) -> ActionDescriptor:
    """
    Build a descriptor backed by menu command `item_id`.

    `discoverability` is the location the shortcut is appended to; when
    None the command's menu path is used. `button_text` defaults to the
    menu label. A missing command degrades to the NONE descriptor.
    """
    info = _lookup(menu_index, item_id)
    if info is None:
        return ActionDescriptor.none()

    location = _menu_location(info) if discoverability is None else discoverability

    return ActionDescriptor(
        kind=kind,
        title=title,
        description=description,
        button_text=info.label if button_text is None else button_text,
        menu_item_id=item_id,
        discoverability_location=location,
        accelerator_keys=info.accelerator_keys,
        disabled=not info.enabled,
    )


# =============================================================================
# Primary actions
# =============================================================================


def _view_stash_action(state, menu_index) -> ActionDescriptor:
    count = state.stash.file_count
    info = _lookup(menu_index, menu_ids.TOGGLE_STASHED_CHANGES)
    if info is None:
        return ActionDescriptor.none()

    return ActionDescriptor(
        kind=ActionKind.VIEW_STASH,
        title="View your stashed changes",
        description=(
            f"You have {count} {_plural(count, 'change', 'changes')} in progress "
            "that you have not yet committed."
        ),
        button_text="View stash",
        menu_item_id=menu_ids.TOGGLE_STASHED_CHANGES,
        discoverability_location=STASH_DISCOVERABILITY,
        disabled=not info.enabled,
    )


def _publish_repository_action(state, menu_index) -> ActionDescriptor:
    # There is no dedicated publish command; Push publishes a repository
    # without a remote, so its shortcut is the one to show.
    return _menu_backed(
        ActionKind.PUBLISH_REPOSITORY,
        menu_ids.PUSH,
        menu_index,
        title="Publish your repository to GitHub",
        description=(
            "This repository is currently only available on your local machine. "
            "By publishing it on GitHub you can share it, and collaborate with others."
        ),
        button_text="Publish repository",
        discoverability="Always available in the toolbar for local repositories",
    )


def _publish_branch_action(state, menu_index) -> ActionDescriptor:
    branch = state.tip.branch.name
    if state.is_github_hosted:
        sharing = "By publishing it to GitHub you can share it, open a pull request, "
    else:
        sharing = "By publishing it you can share it, "

    return _menu_backed(
        ActionKind.PUBLISH_BRANCH,
        menu_ids.PUSH,
        menu_index,
        title="Publish your branch",
        description=(
            f"The current branch ({branch}) hasn't been published to the remote "
            f"yet. {sharing}and collaborate with others."
        ),
        button_text="Publish branch",
        discoverability="Always available in the toolbar",
    )


def _pull_action(state, menu_index) -> ActionDescriptor:
    behind = state.ahead_behind.behind
    remote = state.remote.name
    host = "GitHub" if state.is_github_hosted else "the remote"

    return _menu_backed(
        ActionKind.PULL,
        menu_ids.PULL,
        menu_index,
        title=f"Pull {_commit_count(behind)} from the {remote} remote",
        description=(
            f"The current branch ({state.tip.branch.name}) has "
            f"{_plural(behind, 'a commit', 'commits')} on {host} that "
            f"{_plural(behind, 'does not', 'do not')} exist on your machine."
        ),
        button_text=f"Pull {remote}",
        discoverability="Always available in the toolbar when there are remote changes",
    )


def _push_action(state, menu_index) -> ActionDescriptor:
    ahead = state.ahead_behind.ahead
    remote = state.remote.name
    host = "GitHub" if state.is_github_hosted else "the remote"

    return _menu_backed(
        ActionKind.PUSH,
        menu_ids.PUSH,
        menu_index,
        title=f"Push {_commit_count(ahead)} to the {remote} remote",
        description=(
            f"You have {_plural(ahead, 'one local commit', 'local commits')} "
            f"waiting to be pushed to {host}."
        ),
        button_text=f"Push {remote}",
        discoverability=(
            "Always available in the toolbar when there are local commits "
            "waiting to be pushed"
        ),
    )


def _create_pull_request_action(state, menu_index) -> ActionDescriptor:
    return _menu_backed(
        ActionKind.CREATE_PULL_REQUEST,
        menu_ids.CREATE_PULL_REQUEST,
        menu_index,
        title="Create a Pull Request from your current branch",
        description=(
            f"The current branch ({state.tip.branch.name}) is already published "
            "to GitHub. Create a pull request to propose and collaborate on your "
            "changes."
        ),
        button_text="Create Pull Request",
    )


def _should_offer_pull_request(state: RepositorySyncState, features) -> bool:
    if not features.create_pr_blankslate_enabled():
        return False
    is_default_branch = (
        state.default_branch_name is not None
        and state.tip.branch.name == state.default_branch_name
    )
    return (
        state.is_github_hosted
        and not state.current_pull_request_exists
        and not is_default_branch
    )


def _remote_action(state: RepositorySyncState, menu_index, features) -> ActionDescriptor:
    if state.remote is None:
        return _publish_repository_action(state, menu_index)

    # Branch not published
    if state.ahead_behind is None:
        return _publish_branch_action(state, menu_index)

    # After a rebase the default would be to pull in the tracking branch,
    # which brings back the rewritten history. Offer nothing.
    if state.is_force_push:
        return ActionDescriptor.none()

    if state.ahead_behind.behind > 0:
        return _pull_action(state, menu_index)

    if state.ahead_behind.ahead > 0:
        return _push_action(state, menu_index)

    if _should_offer_pull_request(state, features):
        return _create_pull_request_action(state, menu_index)

    return ActionDescriptor.none()


def select_primary_action(
    state: RepositorySyncState,
    menu_index: MenuIndex,
    features: Optional[FeatureFlags] = None,
) -> ActionDescriptor:
    """
    Select the primary blankslate action for a repository.

    Order matters: an invalid tip shows nothing, a loaded stash wins
    over every remote action, and a force-push situation suppresses
    pull and push.

    Args:
        state: Repository sync snapshot (not modified)
        menu_index: Index built from the current application menu
        features: Feature predicates; defaults to FeatureFlags()

    Returns:
        ActionDescriptor, kind NONE when nothing should be shown
    """
    features = features or FeatureFlags()

    if not state.tip.is_valid:
        return ActionDescriptor.none()

    if (
        features.stashing_enabled()
        and state.stash is not None
        and state.stash.is_loaded
    ):
        stash_action = _view_stash_action(state, menu_index)
        if stash_action.renders:
            return stash_action

    return _remote_action(state, menu_index, features)


# =============================================================================
# Secondary actions
# =============================================================================


def file_manager_name(platform: Optional[str] = None) -> str:
    platform = platform or sys.platform
    if platform == "darwin":
        return "Finder"
    if platform.startswith("win"):
        return "Explorer"
    return "your File Manager"


def select_secondary_actions(
    state: RepositorySyncState,
    menu_index: MenuIndex,
    platform: Optional[str] = None,
) -> list:
    """
    Select the always-available secondary actions.

    Each one is looked up on its own; a missing menu command drops only
    that action. View-on-GitHub needs a GitHub-hosted repository.

    Returns:
        List of rendered ActionDescriptors, in display order
    """
    candidates = [
        _menu_backed(
            ActionKind.CREATE_NEW_FILE,
            menu_ids.CREATE_NEW_FILE,
            menu_index,
            title="Create a new file in your repository",
        ),
        _menu_backed(
            ActionKind.SHOW_IN_FILE_MANAGER,
            menu_ids.OPEN_WORKING_DIRECTORY,
            menu_index,
            title=f"View the files of your repository in {file_manager_name(platform)}",
        ),
    ]

    if state.is_github_hosted:
        candidates.append(
            _menu_backed(
                ActionKind.VIEW_ON_REMOTE_HOST,
                menu_ids.VIEW_REPOSITORY_ON_GITHUB,
                menu_index,
                title="Open the repository page on GitHub in your browser",
            )
        )

    return [action for action in candidates if action.renders]
