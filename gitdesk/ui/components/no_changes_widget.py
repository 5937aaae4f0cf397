"""
No Changes Widget Component

The panel shown when the selected repository has no local changes:
a header, one primary action chosen from the repository's sync state,
and the secondary actions. Clicking a button emits the backing menu
command id; the host runs the command.
"""

import html

from PySide6 import QtCore, QtWidgets

from gitdesk.actions.no_changes import select_primary_action, select_secondary_actions
from gitdesk.actions.types import ActionDescriptor
from gitdesk.core import log
from gitdesk.core.config_manager import BlankslateConfig, read_config
from gitdesk.core.feature_flags import FeatureFlags
from gitdesk.menu.index import MenuIndexCache
from gitdesk.ui.components.base_widget import BaseWidget

ENTER_TRANSITION_MS = 750


def discoverability_html(action: ActionDescriptor) -> str:
    """Render the discoverability location, then each shortcut key as <kbd>."""
    location = html.escape(action.discoverability_location)
    if not action.accelerator_keys:
        return location

    keys = "".join(f"<kbd>{html.escape(k)}</kbd>" for k in action.accelerator_keys)
    return f"{location} or {keys}"


class NoChangesWidget(BaseWidget):
    """
    Widget displaying the "No local changes" blankslate.

    Signals:
        action_triggered: Emitted with the menu item id of a clicked action
    """

    action_triggered = QtCore.Signal(str)

    def __init__(self, parent=None, config=None, features=None, platform=None):
        """
        Initialize the blankslate.

        Args:
            parent: Parent widget
            config: BlankslateConfig (defaults used if None)
            features: Feature predicates (built from config if None)
            platform: Platform for shortcut symbols and wording
        """
        super().__init__(parent)

        self._config = config or BlankslateConfig()
        self._features = features or FeatureFlags(self._config)
        self._platform = platform
        self._menu_cache = MenuIndexCache(platform)

        self._state = None
        self._menu = None
        self._primary_action = ActionDescriptor.none()
        self._secondary_actions = []

        self._transition_timer = None
        self._transitions_enabled = False
        self._mounted = False
        self._animation = None

        layout = QtWidgets.QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._build_header(layout)
        self._build_actions(layout)
        layout.addStretch()

        self.setLayout(layout)

    # =========================================================================
    # UI Construction
    # =========================================================================

    def _build_header(self, layout):
        layout.addWidget(self.create_title_label("No local changes"))
        intro = self.create_meta_label(
            "There are no uncommitted changes for this repository. Here are "
            "some actions you may find useful:"
        )
        layout.addWidget(intro)

    def _build_actions(self, layout):
        self._primary_container = QtWidgets.QWidget()
        self._primary_layout = QtWidgets.QVBoxLayout(self._primary_container)
        self._primary_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._primary_container)

        layout.addWidget(self.create_horizontal_separator())

        self._secondary_container = QtWidgets.QWidget()
        self._secondary_layout = QtWidgets.QVBoxLayout(self._secondary_container)
        self._secondary_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._secondary_container)

    def _build_action_frame(self, action: ActionDescriptor, primary: bool):
        frame = QtWidgets.QFrame()
        frame.setObjectName(f"action_{action.kind.value}")
        frame_layout = QtWidgets.QHBoxLayout(frame)
        frame_layout.setContentsMargins(6, 4, 6, 4)

        text_layout = QtWidgets.QVBoxLayout()
        text_layout.addWidget(self.create_strong_label(action.title))
        if action.description:
            text_layout.addWidget(self.create_meta_label(action.description, "black"))

        hint = self.create_meta_label("")
        hint.setTextFormat(QtCore.Qt.TextFormat.RichText)
        hint.setText(discoverability_html(action))
        text_layout.addWidget(hint)
        frame_layout.addLayout(text_layout, 1)

        button = QtWidgets.QPushButton(action.button_text)
        button.setObjectName("action_button")
        button.setEnabled(not action.disabled)
        button.setDefault(primary)
        menu_item_id = action.menu_item_id
        button.clicked.connect(lambda: self._on_action_clicked(menu_item_id))
        frame_layout.addWidget(button)

        return frame

    # =========================================================================
    # Public API
    # =========================================================================

    def update_state(self, state, menu):
        """
        Recompute and render actions for a sync-state snapshot.

        Args:
            state: RepositorySyncState
            menu: Current application Menu (None if not yet available)
        """
        self._state = state
        self._menu = menu
        self._render()

    def primary_action(self) -> ActionDescriptor:
        return self._primary_action

    def secondary_actions(self) -> list:
        return list(self._secondary_actions)

    def transitions_enabled(self) -> bool:
        return self._transitions_enabled

    def has_pending_transition_timer(self) -> bool:
        return self._transition_timer is not None and self._transition_timer.isActive()

    def update_for_repository(self, repo_root):
        """
        Reload per-repository config and rebuild feature predicates from it.

        The panel is disabled while no repository is selected. An unreadable
        config is reported through error_occurred and defaults are used.
        """
        self.set_enabled_state(bool(repo_root))

        if not repo_root:
            self._config = BlankslateConfig()
        else:
            result = read_config(repo_root)
            if not result.ok:
                self.report_error("Blankslate settings", result.error.message)
            self._config = result.unwrap_or(BlankslateConfig())

        self._features = FeatureFlags(self._config)
        self.refresh()

    def refresh(self):
        if self._state is not None:
            self._render()

    def teardown(self):
        """Release the transition timer and the cached menu index."""
        if self._transition_timer is not None:
            self._transition_timer.stop()
            self._transition_timer.deleteLater()
            self._transition_timer = None
        if self._animation is not None:
            self._animation.stop()
            self._animation = None
        self._menu_cache.clear()
        self._mounted = False
        log.debug("NoChangesWidget torn down")

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render(self):
        menu_index = self._menu_cache.get(self._menu)
        previous_kind = self._primary_action.kind

        self._primary_action = select_primary_action(
            self._state, menu_index, self._features
        )
        self._secondary_actions = select_secondary_actions(
            self._state, menu_index, self._platform
        )

        self.clear_layout(self._primary_layout)
        if self._primary_action.renders:
            self._primary_layout.addWidget(
                self._build_action_frame(self._primary_action, primary=True)
            )

        self.clear_layout(self._secondary_layout)
        for action in self._secondary_actions:
            self._secondary_layout.addWidget(
                self._build_action_frame(action, primary=False)
            )

        if self._transitions_enabled and previous_kind != self._primary_action.kind:
            self._animate_primary()

    def _animate_primary(self):
        effect = QtWidgets.QGraphicsOpacityEffect(self._primary_container)
        self._primary_container.setGraphicsEffect(effect)
        animation = QtCore.QPropertyAnimation(effect, b"opacity", self)
        animation.setDuration(ENTER_TRANSITION_MS)
        animation.setStartValue(0.0)
        animation.setEndValue(1.0)
        animation.start()
        self._animation = animation

    def _on_action_clicked(self, menu_item_id):
        log.info(f"Blankslate action triggered: {menu_item_id}")
        self.action_triggered.emit(menu_item_id)

    # =========================================================================
    # Transition timer
    # =========================================================================

    def _start_transition_timer(self):
        # Transitions stay off at first so the initial action appears instantly
        timer = QtCore.QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(self._config.transition_delay_ms)
        timer.timeout.connect(self._on_transition_timer)
        timer.start()
        self._transition_timer = timer

    def _on_transition_timer(self):
        self._transitions_enabled = True
        if self._transition_timer is not None:
            self._transition_timer.deleteLater()
            self._transition_timer = None

    def showEvent(self, event):
        super().showEvent(event)
        if not self._mounted:
            self._mounted = True
            self._start_transition_timer()

    def closeEvent(self, event):
        self.teardown()
        super().closeEvent(event)
