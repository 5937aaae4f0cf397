"""
Base Widget for UI Components

Common structure, label helpers and enable-state handling shared by
GitDesk panel components.
"""

from PySide6 import QtCore, QtWidgets

from gitdesk.core import log


class BaseWidget(QtWidgets.QWidget):
    """
    Base class for GitDesk UI components.

    Provides:
    - Consistent initialization
    - Common signal patterns
    - Label and layout helpers
    - Enable/disable state management
    """

    error_occurred = QtCore.Signal(str, str)  # (title, message)
    enabled_state_changed = QtCore.Signal(bool)

    def __init__(self, parent=None):
        """
        Initialize base widget.

        Args:
            parent: Parent widget (usually the hosting panel)
        """
        super().__init__(parent)
        self._parent_panel = parent
        self._is_enabled = True

        self._meta_font_size = 9
        self._strong_font_size = 11
        self._title_font_size = 16

        log.debug(f"{self.__class__.__name__} initialized")

    # =========================================================================
    # State Management
    # =========================================================================

    def set_enabled_state(self, enabled: bool):
        """
        Enable or disable this component.

        Args:
            enabled: True to enable, False to disable
        """
        self._is_enabled = enabled
        self.setEnabled(enabled)
        self.enabled_state_changed.emit(enabled)
        log.debug(f"{self.__class__.__name__} enabled={enabled}")

    def report_error(self, title: str, message: str):
        """Log an error and notify listeners; the host decides how to show it."""
        log.error(f"{title}: {message}")
        self.error_occurred.emit(title, message)

    # =========================================================================
    # Layout Helpers
    # =========================================================================

    def create_title_label(self, text: str) -> QtWidgets.QLabel:
        """Create a large heading label."""
        label = QtWidgets.QLabel(text)
        label.setStyleSheet(f"font-weight: bold; font-size: {self._title_font_size}px;")
        return label

    def create_meta_label(self, text: str, color: str = "gray") -> QtWidgets.QLabel:
        """
        Create a small metadata label.

        Args:
            text: Label text
            color: Text color

        Returns:
            QLabel: Styled label
        """
        label = QtWidgets.QLabel(text)
        label.setWordWrap(True)
        label.setStyleSheet(f"color: {color}; font-size: {self._meta_font_size}px;")
        return label

    def create_strong_label(self, text: str, color: str = "black") -> QtWidgets.QLabel:
        """
        Create an emphasized label.

        Args:
            text: Label text
            color: Text color

        Returns:
            QLabel: Styled label
        """
        label = QtWidgets.QLabel(text)
        label.setWordWrap(True)
        label.setStyleSheet(
            f"font-weight: bold; color: {color}; font-size: {self._strong_font_size}px;"
        )
        return label

    def create_horizontal_separator(self) -> QtWidgets.QFrame:
        """
        Create a horizontal line separator.

        Returns:
            QFrame: Horizontal line
        """
        line = QtWidgets.QFrame()
        line.setFrameShape(QtWidgets.QFrame.HLine)
        line.setFrameShadow(QtWidgets.QFrame.Sunken)
        return line

    @staticmethod
    def clear_layout(layout: QtWidgets.QLayout):
        """Remove and schedule deletion of every widget in a layout."""
        while layout.count():
            item = layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.hide()
                widget.setParent(None)
                widget.deleteLater()

    # =========================================================================
    # Abstract Methods (Override in Subclasses)
    # =========================================================================

    def update_for_repository(self, repo_root: str):
        """
        Update component when repository changes.

        Args:
            repo_root: Path to new repository root (or None if no repo)
        """
        pass

    def refresh(self):
        """Refresh component display."""
        pass
