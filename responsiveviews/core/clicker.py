from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


class Action(Enum):
    """User intents emitted by the action panel."""

    INCREMENT = "Increment"
    RESET = "Reset"


def format_round(index: int, score: int) -> str:
    """Scoreboard label for the round at 0-based *index*."""
    return f"Round {index + 1}: {score} clicks"


class ScoreHistory:
    """Completed-round click counts in chronological order.

    One instance is shared by reference between the clicker, which appends
    to it, and the scoreboard, which only reads it.
    """

    def __init__(self) -> None:
        self._scores: List[int] = []

    def __len__(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[int]:
        return iter(self._scores)

    def __getitem__(self, index: int) -> int:
        return self._scores[index]

    def append(self, score: int) -> int:
        """Record a finished round and return its 0-based index."""
        self._scores.append(score)
        return len(self._scores) - 1

    def clear(self) -> None:
        self._scores.clear()

    def scores(self) -> List[int]:
        """Snapshot of the recorded scores."""
        return list(self._scores)

    def labels(self) -> List[str]:
        """Scoreboard lines, oldest round first."""
        return [format_round(i, score) for i, score in enumerate(self._scores)]


class CookieClicker:
    """Counts clicks for the current round and commits rounds to a history.

    Pass the same :class:`ScoreHistory` that the scoreboard reads to share
    results. Without one the clicker keeps a private history, which is how
    the scoreboard-less layouts behaved.
    """

    def __init__(self, history: Optional[ScoreHistory] = None) -> None:
        self._history = history if history is not None else ScoreHistory()
        self._count = 0

    @property
    def count(self) -> int:
        """Clicks in the current round."""
        return self._count

    @property
    def history(self) -> ScoreHistory:
        return self._history

    def increment(self) -> int:
        self._count += 1
        logger.debug("Click %d", self._count)
        return self._count

    def reset(self) -> int:
        """Commit the current round to the history and start a new one.

        Returns the committed score.
        """
        score = self._count
        index = self._history.append(score)
        self._count = 0
        logger.info("Round %d committed: %d clicks", index + 1, score)
        return score

    def dispatch(self, action: Action | str) -> None:
        """Apply an intent, given as an :class:`Action` or its button label."""
        if not isinstance(action, Action):
            try:
                action = Action(action)
            except ValueError:
                raise ValueError(f"Unknown action: {action!r}") from None
        if action is Action.INCREMENT:
            self.increment()
        else:
            self.reset()
