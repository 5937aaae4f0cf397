"""
Force-push detection after a rebase.
"""

from __future__ import annotations

from typing import Mapping, Optional

from gitdesk.actions.types import AheadBehind, Tip


def is_current_branch_force_push(
    tip: Tip,
    rebased_branches: Optional[Mapping[str, str]],
    ahead_behind: Optional[AheadBehind],
) -> bool:
    """
    Check whether pushing the current branch would need a force push.

    True only when the branch was rebased in this session (its current
    tip matches the sha recorded right after the rebase) and it has
    diverged from its upstream.

    Args:
        tip: Current HEAD
        rebased_branches: branch name -> tip sha recorded after rebase
        ahead_behind: Counts against the upstream, None if unpublished
    """
    if ahead_behind is None or not tip.is_valid:
        return False

    recorded = (rebased_branches or {}).get(tip.branch.name)
    rebased = recorded is not None and recorded == tip.branch.tip_sha

    return rebased and ahead_behind.ahead > 0 and ahead_behind.behind > 0
