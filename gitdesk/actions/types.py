"""
GitDesk Action Types

Repository synchronization state consumed by the blankslate selector,
the action descriptors it produces, and the backend protocol used to
collect the state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from gitdesk.menu.accelerator import format_accelerator


class TipState(Enum):
    UNKNOWN = "unknown"
    UNBORN = "unborn"
    DETACHED = "detached"
    VALID = "valid"


@dataclass(frozen=True)
class Branch:
    name: str
    tip_sha: str = ""


@dataclass(frozen=True)
class Tip:
    """
    HEAD of the repository.

    `branch` is only set when `kind` is TipState.VALID.
    """

    kind: TipState
    branch: Optional[Branch] = None

    @staticmethod
    def valid(name: str, tip_sha: str = "") -> Tip:
        return Tip(kind=TipState.VALID, branch=Branch(name=name, tip_sha=tip_sha))

    @property
    def is_valid(self) -> bool:
        return self.kind is TipState.VALID and self.branch is not None


@dataclass(frozen=True)
class Remote:
    name: str
    url: str = ""


@dataclass(frozen=True)
class AheadBehind:
    ahead: int = 0
    behind: int = 0


class StashLoadState(Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class StashEntry:
    """A stash for the current branch; `file_count` is meaningful once LOADED."""

    load_state: StashLoadState = StashLoadState.NOT_LOADED
    file_count: int = 0

    @property
    def is_loaded(self) -> bool:
        return self.load_state is StashLoadState.LOADED


@dataclass(frozen=True)
class RepositorySyncState:
    """
    Snapshot of a repository's synchronization state.

    Attributes:
        tip: Current HEAD
        remote: Configured remote, None if the repository was never published
        ahead_behind: Counts against the upstream, None if the branch
            has no upstream (never pushed)
        is_force_push: Branch diverged after a history rewrite
        default_branch_name: Repository default branch, if known
        current_pull_request_exists: A PR is open for the current branch
        stash: Stash for the current branch, None if there is none
        is_github_hosted: Remote lives on GitHub
    """

    tip: Tip
    remote: Optional[Remote] = None
    ahead_behind: Optional[AheadBehind] = None
    is_force_push: bool = False
    default_branch_name: Optional[str] = None
    current_pull_request_exists: bool = False
    stash: Optional[StashEntry] = None
    is_github_hosted: bool = False


class ActionKind(Enum):
    # Primary (at most one is shown)
    VIEW_STASH = "view_stash"
    PUBLISH_REPOSITORY = "publish_repository"
    PUBLISH_BRANCH = "publish_branch"
    PULL = "pull"
    PUSH = "push"
    CREATE_PULL_REQUEST = "create_pull_request"
    NONE = "none"

    # Secondary
    SHOW_IN_FILE_MANAGER = "show_in_file_manager"
    CREATE_NEW_FILE = "create_new_file"
    VIEW_ON_REMOTE_HOST = "view_on_remote_host"


@dataclass(frozen=True)
class ActionDescriptor:
    """
    One blankslate action, ready to render.

    Attributes:
        kind: Which action this is
        title: Heading text
        description: Body text
        button_text: Label of the action button
        menu_item_id: Backing menu command; clicking the button invokes it
        discoverability_location: Where else to find the command, without
            the shortcut
        accelerator_keys: Shortcut keys, rendered after the location
        disabled: Button disabled because the menu command is disabled
    """

    kind: ActionKind
    title: str = ""
    description: str = ""
    button_text: str = ""
    menu_item_id: Optional[str] = None
    discoverability_location: str = ""
    accelerator_keys: tuple = ()
    disabled: bool = False

    @staticmethod
    def none() -> ActionDescriptor:
        return ActionDescriptor(kind=ActionKind.NONE)

    @property
    def discoverability_text(self) -> str:
        """Location plus " or <shortcut>" when the command has one."""
        if not self.accelerator_keys:
            return self.discoverability_location
        shortcut = format_accelerator(self.accelerator_keys)
        return f"{self.discoverability_location} or {shortcut}"

    @property
    def renders(self) -> bool:
        return self.kind is not ActionKind.NONE


class SyncBackend(Protocol):
    """
    Protocol for the git-status-polling side.
    Can be implemented over a git client, a script runner or a test stub.
    """

    def is_git_available(self) -> bool:
        """Check if git is available."""
        ...

    def current_branch(self, repo_root: str) -> Optional[str]:
        """Get current branch name (None when detached or unborn)."""
        ...

    def head_sha(self, repo_root: str) -> Optional[str]:
        """Get the commit id HEAD points at (None when unborn)."""
        ...

    def get_upstream_ref(self, repo_root: str) -> Optional[str]:
        """Get upstream tracking branch."""
        ...

    def get_ahead_behind(self, repo_root: str, upstream: str) -> dict:
        """Get ahead/behind counts as {"ok", "ahead", "behind", "error"}."""
        ...

    def get_remote_url(self, repo_root: str, name: str) -> Optional[str]:
        """Get URL of a named remote (None if it does not exist)."""
        ...

    def default_branch(self, repo_root: str, remote: str) -> Optional[str]:
        """Get the remote's default branch name."""
        ...

    def stash_file_count(self, repo_root: str, branch: str) -> Optional[int]:
        """Number of files in the branch's stash, None if no stash."""
        ...


@dataclass
class SyncContext:
    """
    Context passed to sync-state collection.

    Holds the backend and the per-repository details that are not part
    of git itself (open pull request, rebase bookkeeping, config).
    """

    git: SyncBackend
    repo_root: Optional[str] = None
    remote_name: str = "origin"
    has_open_pull_request: bool = False
    rebased_branches: Optional[dict] = None
    config: Any = None
