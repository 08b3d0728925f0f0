"""Ready-made listeners reporting training progress."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from tqdm.auto import tqdm

from .events import LearningEvent, LearningEventType


class ConsoleProgressListener:
    """Print one line per iteration with the current total network error."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def __call__(self, event: LearningEvent) -> None:
        if event.event_type is not LearningEventType.EPOCH_ENDED:
            return
        rule = event.source
        print(
            f"{rule.current_iteration}. iteration | Total network error: {rule.total_network_error}",
            file=self.stream or sys.stdout,
        )


class ProgressBarListener:
    """Drive a ``tqdm`` bar sized by the rule's iteration cap."""

    def __init__(self, desc: str = "Training") -> None:
        self.desc = desc
        self._bar: Optional[tqdm] = None

    def __call__(self, event: LearningEvent) -> None:
        rule = event.source
        if event.event_type is LearningEventType.LEARNING_STOPPED:
            if self._bar is not None:
                self._bar.close()
                self._bar = None
            return
        if self._bar is None:
            self._bar = tqdm(total=rule.max_iterations, desc=self.desc)
        self._bar.update(1)
        self._bar.set_postfix(error=f"{rule.total_network_error:.6f}")


class ErrorHistoryListener:
    """Record the total network error of every iteration."""

    def __init__(self) -> None:
        self.errors: List[float] = []

    def __call__(self, event: LearningEvent) -> None:
        if event.event_type is LearningEventType.EPOCH_ENDED:
            self.errors.append(float(event.source.total_network_error))


__all__ = ["ConsoleProgressListener", "ErrorHistoryListener", "ProgressBarListener"]
