"""Events delivered to learning listeners."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from .rules import SupervisedLearning


class LearningEventType(Enum):
    EPOCH_ENDED = "epoch_ended"
    LEARNING_STOPPED = "learning_stopped"


@dataclass(frozen=True, slots=True)
class LearningEvent:
    """Notification raised synchronously from inside :meth:`SupervisedLearning.learn`."""

    source: "SupervisedLearning"
    event_type: LearningEventType


LearningEventListener = Callable[[LearningEvent], None]


__all__ = ["LearningEvent", "LearningEventListener", "LearningEventType"]
