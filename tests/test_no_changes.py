# -*- coding: utf-8 -*-
"""
Tests for actions.no_changes - choosing the blankslate actions
"""

import logging
from dataclasses import replace

import pytest

from gitdesk.actions.no_changes import (
    file_manager_name,
    format_discoverability,
    select_primary_action,
    select_secondary_actions,
)
from gitdesk.actions.types import (
    ActionDescriptor,
    ActionKind,
    AheadBehind,
    Remote,
    RepositorySyncState,
    StashEntry,
    StashLoadState,
    Tip,
    TipState,
)
from gitdesk.core.config_manager import BlankslateConfig
from gitdesk.core.feature_flags import FeatureFlags
from gitdesk.menu.index import MenuItemInfo, build_menu_index


ALL_FEATURES = FeatureFlags(
    BlankslateConfig(stashing_enabled=True, create_pr_blankslate_enabled=True)
)
NO_FEATURES = FeatureFlags(
    BlankslateConfig(stashing_enabled=False, create_pr_blankslate_enabled=False)
)


@pytest.fixture
def menu_index(app_menu):
    return build_menu_index(app_menu, platform="linux")


def _warnings(caplog):
    return [
        r for r in caplog.records
        if r.name == "gitdesk" and r.levelno == logging.WARNING
    ]


class TestTipGate:

    @pytest.mark.parametrize(
        "kind", [TipState.UNKNOWN, TipState.UNBORN, TipState.DETACHED]
    )
    def test_invalid_tip_shows_nothing(self, kind, synced_state, menu_index):
        state = replace(
            synced_state,
            tip=Tip(kind=kind),
            stash=StashEntry(StashLoadState.LOADED, 2),
        )
        action = select_primary_action(state, menu_index, ALL_FEATURES)
        assert action.kind is ActionKind.NONE
        assert not action.renders


class TestStash:

    def test_stash_preempts_pull(self, synced_state, menu_index):
        state = replace(
            synced_state,
            ahead_behind=AheadBehind(ahead=0, behind=2),
            stash=StashEntry(StashLoadState.LOADED, 3),
        )

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.VIEW_STASH
        assert action.title == "View your stashed changes"
        assert action.button_text == "View stash"
        assert action.menu_item_id == "toggle-stashed-changes"
        assert "3 changes in progress" in action.description
        assert "bottom of the Changes tab" in action.discoverability_text

    def test_single_change_wording(self, synced_state, menu_index):
        state = replace(synced_state, stash=StashEntry(StashLoadState.LOADED, 1))
        action = select_primary_action(state, menu_index, ALL_FEATURES)
        assert "You have 1 change in progress" in action.description

    def test_stash_still_loading_falls_through(self, synced_state, menu_index):
        state = replace(
            synced_state,
            ahead_behind=AheadBehind(ahead=0, behind=2),
            stash=StashEntry(StashLoadState.LOADING),
        )
        action = select_primary_action(state, menu_index, ALL_FEATURES)
        assert action.kind is ActionKind.PULL

    def test_stashing_disabled_ignores_stash(self, synced_state, menu_index):
        state = replace(
            synced_state,
            ahead_behind=AheadBehind(ahead=1, behind=0),
            stash=StashEntry(StashLoadState.LOADED, 3),
        )
        action = select_primary_action(state, menu_index, NO_FEATURES)
        assert action.kind is ActionKind.PUSH

    def test_disabled_stash_command(self, synced_state, app_menu):
        index = build_menu_index(app_menu)
        index["toggle-stashed-changes"] = replace(
            index["toggle-stashed-changes"], enabled=False
        )
        state = replace(synced_state, stash=StashEntry(StashLoadState.LOADED, 2))

        action = select_primary_action(state, index, ALL_FEATURES)

        assert action.kind is ActionKind.VIEW_STASH
        assert action.disabled is True

    def test_missing_stash_command_falls_through(self, synced_state, menu_index, caplog):
        caplog.set_level(logging.WARNING, logger="gitdesk")
        del menu_index["toggle-stashed-changes"]
        state = replace(
            synced_state,
            ahead_behind=AheadBehind(ahead=0, behind=1),
            stash=StashEntry(StashLoadState.LOADED, 2),
        )

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.PULL
        assert len(_warnings(caplog)) == 1


class TestPublish:

    def test_no_remote_publishes_repository(self, menu_index):
        state = RepositorySyncState(tip=Tip.valid("main"))

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.PUBLISH_REPOSITORY
        assert action.title == "Publish your repository to GitHub"
        assert action.button_text == "Publish repository"
        assert action.menu_item_id == "push"
        assert action.discoverability_text == (
            "Always available in the toolbar for local repositories or Ctrl+P"
        )

    def test_unpublished_branch_on_github(self, synced_state, menu_index):
        state = replace(synced_state, ahead_behind=None)

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.PUBLISH_BRANCH
        assert action.button_text == "Publish branch"
        assert "(feature/blankslate)" in action.description
        assert "to GitHub" in action.description
        assert "open a pull request" in action.description

    def test_unpublished_branch_elsewhere(self, synced_state, menu_index):
        state = replace(synced_state, ahead_behind=None, is_github_hosted=False)

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.PUBLISH_BRANCH
        assert "GitHub" not in action.description
        assert "open a pull request" not in action.description
        assert action.description.endswith("and collaborate with others.")


class TestForcePush:

    def test_force_push_suppresses_push(self, synced_state, menu_index):
        state = replace(
            synced_state,
            ahead_behind=AheadBehind(ahead=3, behind=0),
            is_force_push=True,
        )
        assert select_primary_action(state, menu_index, ALL_FEATURES).kind is ActionKind.NONE

    def test_force_push_suppresses_pull(self, synced_state, menu_index):
        state = replace(
            synced_state,
            ahead_behind=AheadBehind(ahead=3, behind=4),
            is_force_push=True,
        )
        assert select_primary_action(state, menu_index, ALL_FEATURES).kind is ActionKind.NONE


class TestPullPush:

    def test_pull_single_commit(self, synced_state, menu_index):
        state = replace(synced_state, ahead_behind=AheadBehind(ahead=0, behind=1))

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.PULL
        assert "a commit" in action.title
        assert action.title == "Pull a commit from the origin remote"
        assert action.button_text == "Pull origin"
        assert "has a commit on GitHub that does not exist" in action.description
        assert action.accelerator_keys == ("Ctrl", "Shift", "P")
        assert action.discoverability_text.endswith(" or Ctrl+Shift+P")

    def test_pull_many_commits(self, synced_state, menu_index):
        state = replace(
            synced_state,
            remote=Remote(name="upstream"),
            ahead_behind=AheadBehind(ahead=2, behind=5),
            is_github_hosted=False,
        )

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.PULL
        assert "5 commits" in action.title
        assert action.title == "Pull 5 commits from the upstream remote"
        assert action.button_text == "Pull upstream"
        assert "commits on the remote that do not exist" in action.description

    def test_push_single_commit(self, synced_state, menu_index):
        state = replace(synced_state, ahead_behind=AheadBehind(ahead=1, behind=0))

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.PUSH
        assert action.title == "Push a commit to the origin remote"
        assert action.button_text == "Push origin"
        assert action.description == (
            "You have one local commit waiting to be pushed to GitHub."
        )

    def test_push_many_commits(self, synced_state, menu_index):
        state = replace(
            synced_state,
            ahead_behind=AheadBehind(ahead=4, behind=0),
            is_github_hosted=False,
        )

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action.title == "Push 4 commits to the origin remote"
        assert action.description == (
            "You have local commits waiting to be pushed to the remote."
        )

    def test_disabled_menu_command_disables_button(self, synced_state, app_menu):
        index = build_menu_index(app_menu)
        index["push"] = replace(index["push"], enabled=False)
        state = replace(synced_state, ahead_behind=AheadBehind(ahead=1, behind=0))

        action = select_primary_action(state, index, ALL_FEATURES)

        assert action.kind is ActionKind.PUSH
        assert action.disabled is True

    def test_shortcut_clause_omitted_without_accelerator(self, synced_state):
        index = {"push": MenuItemInfo(label="Push", parent_menu_labels=("Repository",))}
        state = replace(synced_state, ahead_behind=AheadBehind(ahead=1, behind=0))

        action = select_primary_action(state, index, ALL_FEATURES)

        assert action.discoverability_text == (
            "Always available in the toolbar when there are local commits "
            "waiting to be pushed"
        )


class TestCreatePullRequest:

    def test_offered_for_in_sync_feature_branch(self, synced_state, menu_index):
        action = select_primary_action(synced_state, menu_index, ALL_FEATURES)

        assert action.kind is ActionKind.CREATE_PULL_REQUEST
        assert action.title == "Create a Pull Request from your current branch"
        assert action.button_text == "Create Pull Request"
        assert action.discoverability_text == "Branch menu or Ctrl+R"

    def test_not_offered_on_default_branch(self, synced_state, menu_index):
        state = replace(synced_state, default_branch_name="feature/blankslate")
        assert select_primary_action(state, menu_index, ALL_FEATURES).kind is ActionKind.NONE

    def test_not_offered_with_open_pull_request(self, synced_state, menu_index):
        state = replace(synced_state, current_pull_request_exists=True)
        assert select_primary_action(state, menu_index, ALL_FEATURES).kind is ActionKind.NONE

    def test_not_offered_off_github(self, synced_state, menu_index):
        state = replace(synced_state, is_github_hosted=False)
        assert select_primary_action(state, menu_index, ALL_FEATURES).kind is ActionKind.NONE

    def test_not_offered_when_feature_disabled(self, synced_state, menu_index):
        assert select_primary_action(synced_state, menu_index, NO_FEATURES).kind is ActionKind.NONE

    def test_unknown_default_branch_still_offers(self, synced_state, menu_index):
        state = replace(synced_state, default_branch_name=None)
        action = select_primary_action(state, menu_index, ALL_FEATURES)
        assert action.kind is ActionKind.CREATE_PULL_REQUEST

    def test_default_features_do_not_offer(self, synced_state, menu_index):
        assert select_primary_action(synced_state, menu_index).kind is ActionKind.NONE


class TestLookupMiss:

    def test_missing_command_renders_nothing(self, synced_state, menu_index, caplog):
        caplog.set_level(logging.DEBUG, logger="gitdesk")
        del menu_index["pull"]
        state = replace(synced_state, ahead_behind=AheadBehind(ahead=0, behind=2))

        action = select_primary_action(state, menu_index, ALL_FEATURES)

        assert action == ActionDescriptor.none()
        warnings = _warnings(caplog)
        assert len(warnings) == 1
        assert "Could not find matching menu item for pull" in warnings[0].getMessage()

    def test_empty_index_never_raises(self, synced_state):
        state = replace(synced_state, remote=None)
        assert select_primary_action(state, {}, ALL_FEATURES).kind is ActionKind.NONE

    def test_inputs_not_modified(self, synced_state, menu_index):
        before_index = dict(menu_index)
        select_primary_action(synced_state, menu_index, ALL_FEATURES)
        assert menu_index == before_index


class TestDiscoverability:

    def test_with_keys(self):
        info = MenuItemInfo(
            label="Fetch",
            accelerator_keys=("Ctrl", "Shift", "T"),
            parent_menu_labels=("Remotes", "Repository"),
        )
        assert format_discoverability(info) == "Remotes -> Repository menu or Ctrl+Shift+T"

    def test_without_keys(self):
        info = MenuItemInfo(label="New file", parent_menu_labels=("File",))
        assert format_discoverability(info) == "File menu"


class TestSecondaryActions:

    def test_all_three_on_github(self, synced_state, menu_index):
        actions = select_secondary_actions(synced_state, menu_index, platform="darwin")

        assert [a.kind for a in actions] == [
            ActionKind.CREATE_NEW_FILE,
            ActionKind.SHOW_IN_FILE_MANAGER,
            ActionKind.VIEW_ON_REMOTE_HOST,
        ]
        assert actions[0].button_text == "New file"
        assert actions[0].discoverability_text == "File menu"
        assert actions[1].title == "View the files of your repository in Finder"
        assert actions[1].button_text == "Show in Finder"
        assert actions[2].discoverability_text == "Repository menu or Ctrl+Shift+G"

    def test_remote_host_hidden_off_github(self, synced_state, menu_index):
        state = replace(synced_state, is_github_hosted=False)
        kinds = [a.kind for a in select_secondary_actions(state, menu_index)]
        assert ActionKind.VIEW_ON_REMOTE_HOST not in kinds
        assert len(kinds) == 2

    def test_each_action_degrades_alone(self, synced_state, menu_index, caplog):
        caplog.set_level(logging.WARNING, logger="gitdesk")
        del menu_index["create-new-file"]

        actions = select_secondary_actions(synced_state, menu_index)

        assert [a.kind for a in actions] == [
            ActionKind.SHOW_IN_FILE_MANAGER,
            ActionKind.VIEW_ON_REMOTE_HOST,
        ]
        assert len(_warnings(caplog)) == 1

    @pytest.mark.parametrize(
        "platform,name",
        [("darwin", "Finder"), ("win32", "Explorer"), ("linux", "your File Manager")],
    )
    def test_file_manager_name(self, platform, name):
        assert file_manager_name(platform) == name
