"""Tests for ScoringSession."""

import threading

import numpy as np
import pytest

from transit_quiz.errors import OutOfRangeSelectionError
from transit_quiz.scoring import ScoringSession
from transit_quiz.task_factory import TaskFactory
from transit_quiz.types import SessionStats


@pytest.fixture
def task():
    return TaskFactory(series_length=30).create_task(np.random.default_rng(99))


def test_fresh_session():
    """Test initial totals and accuracy."""
    session = ScoringSession()
    assert session.stats == SessionStats(total_answered=0, total_correct=0)
    assert session.accuracy_percent() == 0


def test_record_correct_pick(task):
    """Test recording the correct panel."""
    session = ScoringSession()

    result = session.record(task, task.correct_option_index)

    assert result.correct is True
    assert result.stats == SessionStats(total_answered=1, total_correct=1)
    assert session.accuracy_percent() == 100


def test_record_wrong_pick(task):
    """Test recording a wrong panel."""
    session = ScoringSession()
    other = (task.correct_option_index + 1) % task.option_count

    result = session.record(task, other)

    assert result.correct is False
    assert result.stats == SessionStats(total_answered=1, total_correct=0)
    assert session.accuracy_percent() == 0


def test_record_out_of_range(task):
    """Test rejection of invalid selections leaves totals unchanged."""
    session = ScoringSession()
    session.record(task, task.correct_option_index)

    for bad in (-1, task.option_count, 17, 1.0, True, None):
        with pytest.raises(OutOfRangeSelectionError):
            session.record(task, bad)

    assert session.stats == SessionStats(total_answered=1, total_correct=1)


def test_record_accepts_numpy_integers(task):
    """Test that numpy integer selections are accepted."""
    session = ScoringSession()
    result = session.record(task, np.int64(task.correct_option_index))
    assert result.correct is True


def test_duplicate_records_are_counted(task):
    """Test that the session does not deduplicate by task."""
    session = ScoringSession()
    session.record(task, task.correct_option_index)
    session.record(task, task.correct_option_index)
    assert session.stats.total_answered == 2


def test_totals_invariants():
    """Test monotonic totals across a mixed sequence of answers."""
    factory = TaskFactory(series_length=20)
    rng = np.random.default_rng(5)
    session = ScoringSession()

    previous = session.stats
    for _ in range(100):
        task = factory.create_task(rng)
        pick = int(rng.integers(0, task.option_count))
        stats = session.record(task, pick).stats
        assert stats.total_answered == previous.total_answered + 1
        assert stats.total_correct >= previous.total_correct
        assert stats.total_correct <= stats.total_answered
        previous = stats


def test_accuracy_rounds_half_up(task):
    """Test accuracy percentage rounding."""
    session = ScoringSession()
    wrong = (task.correct_option_index + 1) % task.option_count

    session.record(task, task.correct_option_index)
    for _ in range(7):
        session.record(task, wrong)

    # 1/8 = 12.5%
    assert session.accuracy_percent() == 13

    session.reset()
    session.record(task, task.correct_option_index)
    session.record(task, task.correct_option_index)
    session.record(task, wrong)
    assert session.accuracy_percent() == 67


def test_reset():
    """Test zeroing the totals."""
    session = ScoringSession()
    task = TaskFactory(series_length=10).create_task(np.random.default_rng(1))
    session.record(task, 0)

    session.reset()

    assert session.stats == SessionStats(0, 0)
    assert session.accuracy_percent() == 0


def test_concurrent_records_are_atomic(task):
    """Test that parallel records lose no updates."""
    session = ScoringSession()

    def worker():
        for _ in range(500):
            session.record(task, task.correct_option_index)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert session.stats == SessionStats(total_answered=4000, total_correct=4000)
