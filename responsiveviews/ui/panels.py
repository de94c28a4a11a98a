"""Reusable panels: score display, action buttons, scoreboard and the clicker."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from responsiveviews.core.clicker import Action, format_round
from responsiveviews.ui.colors import PanelColors, blend_hex


class ScorePanel(QWidget):
    """Shows the click count of the current round."""

    def __init__(self, count: int = 0, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._label = QLabel()
        self._label.setObjectName("scoreLabel")
        self._label.setAlignment(Qt.AlignCenter)
        self._label.setStyleSheet("QLabel#scoreLabel { font-size: 26px; font-weight: 600; }")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(self._label)
        self.set_count(count)

    def text(self) -> str:
        return self._label.text()

    def set_count(self, count: int) -> None:
        self._label.setText(f"Current Score: {count}")


class ActionPanel(QWidget):
    """Increment and Reset buttons; clicks are emitted as action labels."""

    action_triggered = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        self._buttons: dict[Action, QPushButton] = {}
        layout.addStretch(1)
        for action in Action:
            button = QPushButton(action.value)
            button.setObjectName("actionButton")
            button.setCursor(Qt.PointingHandCursor)
            button.clicked.connect(lambda _checked=False, a=action: self.action_triggered.emit(a.value))
            self._buttons[action] = button
            layout.addWidget(button)
            layout.addStretch(1)

        hover = blend_hex(PanelColors.BUTTON, "#FFFFFF", 0.15)
        pressed = blend_hex(PanelColors.BUTTON, "#000000", 0.2)
        self.setStyleSheet(
            f"""
            QPushButton#actionButton {{
                background: {PanelColors.BUTTON};
                color: {PanelColors.BUTTON_TEXT};
                border: none;
                border-radius: 20px;
                padding: 10px 24px;
                font-size: 14px;
                font-weight: 600;
            }}
            QPushButton#actionButton:hover {{
                background: {hover};
            }}
            QPushButton#actionButton:pressed {{
                background: {pressed};
            }}
            """
        )

    def button(self, action: Action) -> QPushButton:
        return self._buttons[action]


class Scoreboard(QWidget):
    """Lists completed rounds, oldest first."""

    def __init__(self, rounds: Optional[List[int]] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._list = QListWidget()
        self._list.setObjectName("scoreboardList")
        self._list.setFocusPolicy(Qt.NoFocus)
        self._list.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._list.setStyleSheet(
            "QListWidget#scoreboardList { background: transparent; border: none; font-size: 14px; }"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(self._list, 1)
        self.set_rounds(rounds or [])

    def labels(self) -> List[str]:
        return [self._list.item(i).text() for i in range(self._list.count())]

    def set_rounds(self, rounds: List[int]) -> None:
        self._list.clear()
        for index, score in enumerate(rounds):
            self._list.addItem(format_round(index, score))
            self._list.item(index).setTextAlignment(Qt.AlignCenter)
        if self._list.count():
            self._list.scrollToBottom()


class ClickerPanel(QWidget):
    """Score display above the action buttons."""

    def __init__(self, count: int = 0, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.score_panel = ScorePanel(count)
        self.action_panel = ActionPanel()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addStretch(1)
        layout.addWidget(self.score_panel)
        layout.addSpacing(16)
        layout.addWidget(self.action_panel)
        layout.addStretch(1)
