"""Round-by-round driver for the transit classification quiz.

A round moves from unanswered to answered exactly once. Further picks on an
answered round are ignored, which is what keeps ScoringSession from counting
the same task twice.
"""

import logging
from enum import Enum
from typing import Optional

import numpy as np

from transit_quiz.constants import DEFAULT_OPTION_COUNT
from transit_quiz.scoring import ScoringSession
from transit_quiz.task_factory import TaskFactory
from transit_quiz.types import RecordResult, SessionStats, Task

logger = logging.getLogger(__name__)

__all__ = ['PanelState', 'QuizRound', 'QuizGame']

CORRECT_MESSAGE = "Correct! You found the transit-like dip."
INCORRECT_MESSAGE = "Not quite. Panel {panel} had the transit-like dip."


class PanelState(str, Enum):
    """Highlight state of one panel."""

    NEUTRAL = "neutral"
    CORRECT = "correct"
    WRONG_PICK = "wrong_pick"


class QuizRound:
    """One task and the player's (single) answer to it."""

    def __init__(self, task: Task):
        self.task = task
        self.selection: Optional[int] = None
        self.result: Optional[RecordResult] = None

    @property
    def revealed(self) -> bool:
        return self.result is not None

    def pick(self, index: int, session: ScoringSession) -> Optional[RecordResult]:
        """
        Answer the round.

        Args:
            index: 0-based panel index
            session: Session that accumulates the answer

        Returns:
            RecordResult for the first pick, None if the round was already answered
        """
        if self.revealed:
            logger.debug(f"Ignoring pick {index} on answered task {self.task.id}")
            return None
        result = session.record(self.task, index)
        self.selection = index
        self.result = result
        return result

    def panel_states(self) -> list[PanelState]:
        states = []
        for idx in range(self.task.option_count):
            is_choice = self.selection == idx
            is_correct = self.revealed and idx == self.task.correct_option_index
            if is_correct:
                states.append(PanelState.CORRECT)
            elif self.revealed and is_choice:
                states.append(PanelState.WRONG_PICK)
            else:
                states.append(PanelState.NEUTRAL)
        return states

    def feedback_message(self) -> Optional[str]:
        if not self.revealed:
            return None
        if self.result.correct:
            return CORRECT_MESSAGE
        return INCORRECT_MESSAGE.format(panel=self.task.correct_option_index + 1)


class QuizGame:
    """
    Ties a task factory, a scoring session and a random source together.

    The game always has a current round; next_task() replaces it with a
    fresh unanswered one.
    """

    def __init__(
        self,
        factory: TaskFactory,
        session: ScoringSession,
        rng: np.random.Generator,
        option_count: int = DEFAULT_OPTION_COUNT,
    ):
        self.factory = factory
        self.session = session
        self.rng = rng
        self.option_count = option_count
        self.round = QuizRound(self.factory.create_task(self.rng, self.option_count))

    def next_task(self) -> QuizRound:
        self.round = QuizRound(self.factory.create_task(self.rng, self.option_count))
        return self.round

    def pick(self, index: int) -> Optional[RecordResult]:
        return self.round.pick(index, self.session)

    @property
    def stats(self) -> SessionStats:
        return self.session.stats

    def accuracy_percent(self) -> int:
        return self.session.accuracy_percent()
