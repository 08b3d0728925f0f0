"""Evaluators that run a network over a dataset and collect results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Type, TypeVar

import numpy as np

from .confusion import ConfusionMatrix
from .errors import ErrorFunction, MeanSquaredError

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from ..data.dataset import DataSet
    from ..nets.base import NeuralNetwork


class Evaluator:
    """Consumes ``(network output, desired output)`` pairs one row at a time."""

    def reset(self) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    def process_result(self, output: np.ndarray, desired: np.ndarray) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    @property
    def result(self) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError


class ErrorEvaluator(Evaluator):
    """Aggregate an error function; the result is its total error."""

    def __init__(self, error_function: Optional[ErrorFunction] = None) -> None:
        self.error_function = error_function or MeanSquaredError()

    def reset(self) -> None:
        self.error_function.reset()

    def process_result(self, output: np.ndarray, desired: np.ndarray) -> None:
        self.error_function.add_pattern_error(output, desired)

    @property
    def result(self) -> float:
        return self.error_function.total_error


class ClassifierEvaluator(Evaluator):
    """Collect actual and predicted class indices into a confusion matrix."""

    def __init__(self, class_labels: Sequence[str]) -> None:
        if not class_labels:
            raise ValueError("class_labels must not be empty")
        self.class_labels = [str(label) for label in class_labels]
        self._actual: List[int] = []
        self._predicted: List[int] = []

    def reset(self) -> None:
        self._actual = []
        self._predicted = []

    def process_result(self, output: np.ndarray, desired: np.ndarray) -> None:
        actual, predicted = self.classify(np.asarray(output), np.asarray(desired))
        self._actual.append(actual)
        self._predicted.append(predicted)

    def classify(self, output: np.ndarray, desired: np.ndarray) -> tuple[int, int]:  # pragma: no cover - abstract
        raise NotImplementedError

    @property
    def result(self) -> ConfusionMatrix:
        return ConfusionMatrix.from_predictions(self.class_labels, self._actual, self._predicted)


class MultiClassEvaluator(ClassifierEvaluator):
    """One output per class; the strongest output is the predicted class."""

    def classify(self, output: np.ndarray, desired: np.ndarray) -> tuple[int, int]:
        if output.size != len(self.class_labels) or desired.size != len(self.class_labels):
            raise ValueError(
                f"expected {len(self.class_labels)} outputs, got {output.size} and {desired.size}"
            )
        return int(np.argmax(desired)), int(np.argmax(output))


class BinaryClassEvaluator(ClassifierEvaluator):
    """Single output thresholded into ``negative`` (0) and ``positive`` (1)."""

    def __init__(
        self,
        threshold: float = 0.5,
        class_labels: Sequence[str] = ("negative", "positive"),
    ) -> None:
        if len(class_labels) != 2:
            raise ValueError("binary classification needs exactly two labels")
        super().__init__(class_labels)
        self.threshold = threshold

    def classify(self, output: np.ndarray, desired: np.ndarray) -> tuple[int, int]:
        if output.size != 1 or desired.size != 1:
            raise ValueError("binary classification expects a single output")
        actual = int(float(desired.reshape(-1)[0]) >= 0.5)
        predicted = int(float(output.reshape(-1)[0]) >= self.threshold)
        return actual, predicted


EvaluatorT = TypeVar("EvaluatorT", bound=Evaluator)


class Evaluation:
    """Run a set of evaluators over every row of a dataset."""

    def __init__(self) -> None:
        self.evaluators: Dict[Type[Evaluator], Evaluator] = {}

    def add_evaluator(self, evaluator: Evaluator) -> None:
        self.evaluators[type(evaluator)] = evaluator

    def get_evaluator(self, evaluator_type: Type[EvaluatorT]) -> EvaluatorT:
        for registered_type, evaluator in self.evaluators.items():
            if issubclass(registered_type, evaluator_type):
                return evaluator  # type: ignore[return-value]
        raise KeyError(f"No evaluator of type {evaluator_type.__name__}")

    def evaluate(self, network: "NeuralNetwork", dataset: "DataSet") -> Dict[Type[Evaluator], Any]:
        for evaluator in self.evaluators.values():
            evaluator.reset()
        if len(dataset):
            outputs = network.predict(dataset.inputs)
            for output, desired in zip(outputs, dataset.desired_outputs):
                for evaluator in self.evaluators.values():
                    evaluator.process_result(output, desired)
        return {evaluator_type: evaluator.result for evaluator_type, evaluator in self.evaluators.items()}


__all__ = [
    "BinaryClassEvaluator",
    "ClassifierEvaluator",
    "ErrorEvaluator",
    "Evaluation",
    "Evaluator",
    "MultiClassEvaluator",
]
