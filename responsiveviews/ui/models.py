"""Qt-facing state shared by the panels."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from responsiveviews.core.clicker import Action, CookieClicker, ScoreHistory


class SessionStore(QObject):
    """Wraps the clicker for the lifetime of the screen and signals changes.

    The store owns the shared :class:`ScoreHistory`; panels are rebuilt on
    every layout change but always read from this one instance.
    """

    count_changed = Signal(int)
    rounds_changed = Signal(list)

    def __init__(self, history: Optional[ScoreHistory] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._history = history if history is not None else ScoreHistory()
        self._clicker = CookieClicker(self._history)

    @property
    def history(self) -> ScoreHistory:
        return self._history

    @property
    def count(self) -> int:
        return self._clicker.count

    def rounds(self) -> List[int]:
        return self._history.scores()

    def handle_action(self, action: Action | str) -> None:
        """Apply an intent from the action panel and notify listeners."""
        rounds_before = len(self._history)
        self._clicker.dispatch(action)
        self.count_changed.emit(self._clicker.count)
        if len(self._history) != rounds_before:
            self.rounds_changed.emit(self._history.scores())
