"""Per-class classification measures derived from a confusion matrix."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Sequence, Tuple

import numpy as np
from sklearn.metrics import f1_score, matthews_corrcoef, precision_score, recall_score

from .confusion import ConfusionMatrix


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


@dataclass(frozen=True, slots=True)
class ClassificationMetrics:
    """One-vs-rest counts for a single class and the measures built on them."""

    class_label: str
    true_positive: int
    true_negative: int
    false_positive: int
    false_negative: int

    @property
    def total(self) -> int:
        return self.true_positive + self.true_negative + self.false_positive + self.false_negative

    @property
    def accuracy(self) -> float:
        return _ratio(self.true_positive + self.true_negative, self.total)

    @property
    def error_rate(self) -> float:
        return _ratio(self.false_positive + self.false_negative, self.total)

    def one_vs_rest(self) -> Tuple[np.ndarray, np.ndarray]:
        """Expand the counts into binary ``(y_true, y_pred)`` label arrays."""

        y_true = np.repeat(
            [1, 0, 0, 1],
            [self.true_positive, self.true_negative, self.false_positive, self.false_negative],
        )
        y_pred = np.repeat(
            [1, 0, 1, 0],
            [self.true_positive, self.true_negative, self.false_positive, self.false_negative],
        )
        return y_true, y_pred

    @property
    def precision(self) -> float:
        if not self.total:
            return 0.0
        return float(precision_score(*self.one_vs_rest(), zero_division=0))

    @property
    def recall(self) -> float:
        if not self.total:
            return 0.0
        return float(recall_score(*self.one_vs_rest(), zero_division=0))

    @property
    def specificity(self) -> float:
        return _ratio(self.true_negative, self.true_negative + self.false_positive)

    @property
    def f1_score(self) -> float:
        if not self.total:
            return 0.0
        return float(f1_score(*self.one_vs_rest(), zero_division=0))

    @property
    def false_positive_rate(self) -> float:
        return _ratio(self.false_positive, self.false_positive + self.true_negative)

    @property
    def false_negative_rate(self) -> float:
        return _ratio(self.false_negative, self.false_negative + self.true_positive)

    @property
    def false_discovery_rate(self) -> float:
        return _ratio(self.false_positive, self.false_positive + self.true_positive)

    @property
    def matthews_correlation(self) -> float:
        if not self.total:
            return 0.0
        return float(matthews_corrcoef(*self.one_vs_rest()))

    @property
    def balanced_classification_rate(self) -> float:
        return 0.5 * (self.recall + self.specificity)

    @staticmethod
    def create_from_matrix(matrix: ConfusionMatrix) -> List["ClassificationMetrics"]:
        return [
            ClassificationMetrics(
                class_label=label,
                true_positive=matrix.true_positive(index),
                true_negative=matrix.true_negative(index),
                false_positive=matrix.false_positive(index),
                false_negative=matrix.false_negative(index),
            )
            for index, label in enumerate(matrix.class_labels)
        ]

    @staticmethod
    def average(metrics: Sequence["ClassificationMetrics"]) -> "ClassificationStats":
        """Unweighted mean of every measure across classes."""

        if not metrics:
            raise ValueError("cannot average an empty metrics list")
        values = {
            field.name: float(np.mean([getattr(item, field.name) for item in metrics]))
            for field in fields(ClassificationStats)
            if field.name != "class_count"
        }
        return ClassificationStats(class_count=len(metrics), **values)

    def __str__(self) -> str:
        return "\n".join(
            [
                f"Class: {self.class_label}",
                f"Total items: {self.total}",
                f"True positive: {self.true_positive}",
                f"True negative: {self.true_negative}",
                f"False positive: {self.false_positive}",
                f"False negative: {self.false_negative}",
                *_format_measures(self),
            ]
        )


@dataclass(frozen=True, slots=True)
class ClassificationStats:
    """Class-averaged classification measures."""

    class_count: int
    accuracy: float
    error_rate: float
    precision: float
    recall: float
    specificity: float
    f1_score: float
    false_positive_rate: float
    false_negative_rate: float
    false_discovery_rate: float
    matthews_correlation: float
    balanced_classification_rate: float

    def __str__(self) -> str:
        return "\n".join([f"Average over {self.class_count} classes", *_format_measures(self)])


_MEASURE_TITLES = (
    ("accuracy", "Accuracy"),
    ("error_rate", "Error rate"),
    ("precision", "Precision"),
    ("recall", "Recall"),
    ("specificity", "Specificity"),
    ("f1_score", "F1 score"),
    ("false_positive_rate", "False positive rate"),
    ("false_negative_rate", "False negative rate"),
    ("false_discovery_rate", "False discovery rate"),
    ("matthews_correlation", "Matthews correlation"),
    ("balanced_classification_rate", "Balanced classification rate"),
)


def _format_measures(source: object) -> List[str]:
    return [f"{title}: {getattr(source, name):.4f}" for name, title in _MEASURE_TITLES]


__all__ = ["ClassificationMetrics", "ClassificationStats"]
