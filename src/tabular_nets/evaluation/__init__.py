"""Error measures, confusion matrices and classification metrics."""

from .confusion import ConfusionMatrix
from .errors import ErrorFunction, MeanAbsoluteError, MeanSquaredError
from .evaluator import (
    BinaryClassEvaluator,
    ClassifierEvaluator,
    ErrorEvaluator,
    Evaluation,
    Evaluator,
    MultiClassEvaluator,
)
from .metrics import ClassificationMetrics, ClassificationStats

__all__ = [
    "BinaryClassEvaluator",
    "ClassificationMetrics",
    "ClassificationStats",
    "ClassifierEvaluator",
    "ConfusionMatrix",
    "ErrorEvaluator",
    "ErrorFunction",
    "Evaluation",
    "Evaluator",
    "MeanAbsoluteError",
    "MeanSquaredError",
    "MultiClassEvaluator",
]
