"""
Sync-state collection.

Turns backend queries into a RepositorySyncState snapshot for the
blankslate selector.
"""

from gitdesk.actions.rebase import is_current_branch_force_push
from gitdesk.actions.types import (
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
from gitdesk.core import log
from gitdesk.core.feature_flags import is_github_host
from gitdesk.core.result import Result


def _read_tip(ctx: SyncContext) -> Tip:
    branch = ctx.git.current_branch(ctx.repo_root)
    sha = ctx.git.head_sha(ctx.repo_root)

    if branch:
        return Tip(kind=TipState.VALID, branch=Branch(name=branch, tip_sha=sha or ""))
    if sha:
        return Tip(kind=TipState.DETACHED)
    return Tip(kind=TipState.UNBORN)


def _read_ahead_behind(ctx: SyncContext):
    upstream = ctx.git.get_upstream_ref(ctx.repo_root)
    if not upstream:
        return None

    ab_result = ctx.git.get_ahead_behind(ctx.repo_root, upstream)
    if not ab_result.get("ok"):
        log.warning_safe(
            f"Could not compute ahead/behind against {upstream}",
            ab_result.get("error"),
        )
        return None

    return AheadBehind(
        ahead=ab_result.get("ahead", 0),
        behind=ab_result.get("behind", 0),
    )


def collect_sync_state(ctx: SyncContext) -> Result:
    """
    Collect repository synchronization state.

    Args:
        ctx: Sync context with repo_root set

    Returns:
        Result wrapping a RepositorySyncState, or a failure with code
        "no_repo" / "git_not_found"
    """
    if not ctx.repo_root:
        return Result.failure("no_repo", "No repository path")

    if not ctx.git.is_git_available():
        return Result.failure(
            "git_not_found",
            "Git not available",
            meta={"repo_root": ctx.repo_root},
        )

    tip = _read_tip(ctx)
    if not tip.is_valid:
        log.debug(f"HEAD is {tip.kind.value}, skipping remote state")
        return Result.success(RepositorySyncState(tip=tip))

    url = ctx.git.get_remote_url(ctx.repo_root, ctx.remote_name)
    remote = Remote(name=ctx.remote_name, url=url) if url else None

    ahead_behind = _read_ahead_behind(ctx) if remote else None

    default_branch = (
        ctx.git.default_branch(ctx.repo_root, ctx.remote_name) if remote else None
    )

    stash = None
    count = ctx.git.stash_file_count(ctx.repo_root, tip.branch.name)
    if count is not None:
        stash = StashEntry(load_state=StashLoadState.LOADED, file_count=count)

    state = RepositorySyncState(
        tip=tip,
        remote=remote,
        ahead_behind=ahead_behind,
        is_force_push=is_current_branch_force_push(
            tip, ctx.rebased_branches, ahead_behind
        ),
        default_branch_name=default_branch,
        current_pull_request_exists=ctx.has_open_pull_request,
        stash=stash,
        is_github_hosted=is_github_host(url, ctx.config),
    )

    log.debug(
        f"Sync state for {ctx.repo_root}: branch={tip.branch.name}, "
        f"remote={url}, ahead_behind={ahead_behind}"
    )
    return Result.success(state)
