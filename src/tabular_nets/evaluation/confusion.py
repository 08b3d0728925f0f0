"""Confusion matrix of actual versus predicted classes."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from sklearn.metrics import confusion_matrix


class ConfusionMatrix:
    """Square count table indexed ``[actual, predicted]``."""

    def __init__(self, class_labels: Sequence[str]) -> None:
        if not class_labels:
            raise ValueError("class_labels must not be empty")
        self.class_labels = [str(label) for label in class_labels]
        size = len(self.class_labels)
        self.matrix = np.zeros((size, size), dtype=np.int64)

    @classmethod
    def from_predictions(
        cls,
        class_labels: Sequence[str],
        actual: Sequence[int],
        predicted: Sequence[int],
    ) -> "ConfusionMatrix":
        result = cls(class_labels)
        if len(actual) != len(predicted):
            raise ValueError("actual and predicted must have the same length")
        if len(actual):
            result.matrix = confusion_matrix(
                actual, predicted, labels=list(range(result.class_count))
            ).astype(np.int64)
        return result

    @property
    def class_count(self) -> int:
        return len(self.class_labels)

    @property
    def total(self) -> int:
        return int(self.matrix.sum())

    def increment(self, actual: int, predicted: int) -> None:
        self.matrix[actual, predicted] += 1

    def __getitem__(self, key: tuple[int, int]) -> int:
        return int(self.matrix[key])

    def true_positive(self, class_index: int) -> int:
        return int(self.matrix[class_index, class_index])

    def false_positive(self, class_index: int) -> int:
        return int(self.matrix[:, class_index].sum()) - self.true_positive(class_index)

    def false_negative(self, class_index: int) -> int:
        return int(self.matrix[class_index, :].sum()) - self.true_positive(class_index)

    def true_negative(self, class_index: int) -> int:
        return (
            self.total
            - self.true_positive(class_index)
            - self.false_positive(class_index)
            - self.false_negative(class_index)
        )

    def __str__(self) -> str:
        width = max(
            max(len(label) for label in self.class_labels),
            len(str(int(self.matrix.max()))) if self.matrix.size else 1,
        )
        header = " " * width + " | " + " ".join(label.rjust(width) for label in self.class_labels)
        lines = [header, "-" * len(header)]
        for label, row in zip(self.class_labels, self.matrix):
            cells = " ".join(str(int(count)).rjust(width) for count in row)
            lines.append(f"{label.rjust(width)} | {cells}")
        return "\n".join(lines)


__all__ = ["ConfusionMatrix"]
