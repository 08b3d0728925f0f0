"""Learning rules and training listeners."""

from .events import LearningEvent, LearningEventListener, LearningEventType
from .listeners import ConsoleProgressListener, ErrorHistoryListener, ProgressBarListener
from .rules import (
    LMS,
    BackPropagation,
    MomentumBackpropagation,
    SupervisedLearning,
    rule_from_description,
)

__all__ = [
    "BackPropagation",
    "ConsoleProgressListener",
    "ErrorHistoryListener",
    "LMS",
    "LearningEvent",
    "LearningEventListener",
    "LearningEventType",
    "MomentumBackpropagation",
    "ProgressBarListener",
    "SupervisedLearning",
    "rule_from_description",
]
