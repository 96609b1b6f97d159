"""Transit Quiz - synthetic light curves and a transit classification quiz"""

__version__ = "0.1.0"

from .config import QuizConfig
from .errors import InvalidParameterError, OutOfRangeSelectionError, TransitQuizError
from .quiz import PanelState, QuizGame, QuizRound
from .scoring import ScoringSession
from .synthesizer import SignalSynthesizer, transit_window
from .task_factory import SequentialIdProvider, TaskFactory, uuid4_id
from .types import RecordResult, Sample, SessionStats, Series, SynthesisParams, Task

__all__ = [
    "SignalSynthesizer",
    "TaskFactory",
    "ScoringSession",
    "QuizGame",
    "QuizRound",
    "QuizConfig",
    "PanelState",
    "Sample",
    "Series",
    "SynthesisParams",
    "Task",
    "SessionStats",
    "RecordResult",
    "SequentialIdProvider",
    "uuid4_id",
    "transit_window",
    "TransitQuizError",
    "InvalidParameterError",
    "OutOfRangeSelectionError",
]
