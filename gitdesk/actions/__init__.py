"""
GitDesk Actions Module

Pure-logic layer for the "no local changes" blankslate.
No Qt/UI dependencies - only decision logic.

- collect_sync_state builds a RepositorySyncState from a SyncBackend
- select_primary_action / select_secondary_actions turn that state and
  a menu index into ActionDescriptors
"""

from gitdesk.actions.types import (
    ActionDescriptor,
    ActionKind,
    AheadBehind,
    Branch,
    Remote,
    RepositorySyncState,
    StashEntry,
    StashLoadState,
    SyncContext,
    Tip,
    TipState,
)
from gitdesk.actions.rebase import is_current_branch_force_push
from gitdesk.actions.status import collect_sync_state
from gitdesk.actions.no_changes import (
    format_discoverability,
    select_primary_action,
    select_secondary_actions,
)

__all__ = [
    "ActionDescriptor",
    "ActionKind",
    "AheadBehind",
    "Branch",
    "Remote",
    "RepositorySyncState",
    "StashEntry",
    "StashLoadState",
    "SyncContext",
    "Tip",
    "TipState",
    "is_current_branch_force_push",
    "collect_sync_state",
    "format_discoverability",
    "select_primary_action",
    "select_secondary_actions",
]
