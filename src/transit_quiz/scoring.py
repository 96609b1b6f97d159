"""Running accuracy for a user session."""

import logging
import numbers
import threading

from transit_quiz.errors import OutOfRangeSelectionError
from transit_quiz.types import RecordResult, SessionStats, Task

logger = logging.getLogger(__name__)

__all__ = ['ScoringSession']


class ScoringSession:
    """
    Accumulates answers across many tasks.

    The session keeps no per-task state: recording the same task twice counts
    twice, so callers must stop accepting picks once a task is answered.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._total_answered = 0
        self._total_correct = 0

    @property
    def stats(self) -> SessionStats:
        with self._lock:
            return SessionStats(self._total_answered, self._total_correct)

    def record(self, task: Task, selected_index: int) -> RecordResult:
        """
        Record one selection for a task.

        Args:
            task: The task that was shown
            selected_index: 0-based index of the chosen option

        Returns:
            RecordResult with correctness and the updated totals
        """
        if (
            isinstance(selected_index, bool)
            or not isinstance(selected_index, numbers.Integral)
            or not 0 <= selected_index < task.option_count
        ):
            raise OutOfRangeSelectionError(
                f"Selection {selected_index!r} outside [0, {task.option_count}) for task {task.id}"
            )

        correct = int(selected_index) == task.correct_option_index
        with self._lock:
            self._total_answered += 1
            if correct:
                self._total_correct += 1
            stats = SessionStats(self._total_answered, self._total_correct)

        logger.debug(
            f"Recorded task {task.id}: selected={selected_index}, correct={correct}, "
            f"totals={stats.total_correct}/{stats.total_answered}"
        )
        return RecordResult(correct=correct, stats=stats)

    def accuracy_percent(self) -> int:
        return self.stats.accuracy_percent

    def reset(self) -> None:
        """Start a fresh session with zeroed totals."""
        with self._lock:
            self._total_answered = 0
            self._total_correct = 0
        logger.info("Scoring session reset")
