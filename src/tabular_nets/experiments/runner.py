"""Shared load / split / normalize / train / evaluate / save sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import torch

from ..data import DataSet, MaxNormalizer
from ..evaluation import (
    ClassificationMetrics,
    ErrorEvaluator,
    Evaluation,
    MeanAbsoluteError,
    MeanSquaredError,
    MultiClassEvaluator,
)
from ..learning import (
    ConsoleProgressListener,
    ErrorHistoryListener,
    LearningEventListener,
    ProgressBarListener,
    SupervisedLearning,
)
from ..nets import NeuralNetwork

PROGRESS_STYLES = ("print", "bar", "none")


@dataclass(slots=True)
class ExperimentConfig:
    """Settings for one train-and-evaluate run.

    ``hidden_layers`` and ``momentum`` only matter for networks and rules that
    use them; ``class_labels`` is required for classification runs.
    """

    data_path: str
    input_count: int
    output_count: int
    delimiter: str = ","
    skip_header: bool = False
    split: Tuple[float, float] = (0.6, 0.4)
    seed: Optional[int] = None
    learning_rate: float = 0.1
    max_error: float = 0.01
    max_iterations: int = 10_000
    momentum: float = 0.25
    batch_mode: bool = False
    hidden_layers: Tuple[int, ...] = ()
    class_labels: Tuple[str, ...] = ()
    save_path: Optional[str] = "nn1.nnet"
    device: Optional[str] = None
    progress: str = "print"
    plot_path: Optional[str] = None
    show_outputs: bool = True
    save_heading: str = "Saving trained network"
    done_message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.input_count <= 0:
            raise ValueError("input_count must be positive")
        if self.output_count <= 0:
            raise ValueError("output_count must be positive")
        self.split = tuple(float(part) for part in self.split)  # type: ignore[assignment]
        if len(self.split) != 2 or any(part <= 0 for part in self.split):
            raise ValueError("split must hold two positive fractions (train, test)")
        if abs(sum(self.split) - 1.0) > 1e-6:
            raise ValueError("split fractions must sum to 1")
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if self.max_error < 0:
            raise ValueError("max_error must be non-negative")
        if self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        if not 0.0 <= self.momentum < 1.0:
            raise ValueError("momentum must lie in [0, 1)")
        self.hidden_layers = tuple(int(size) for size in self.hidden_layers)
        if any(size <= 0 for size in self.hidden_layers):
            raise ValueError("hidden layer sizes must be positive")
        self.class_labels = tuple(str(label) for label in self.class_labels)
        if self.class_labels and len(self.class_labels) != self.output_count:
            raise ValueError("class_labels must name one class per output")
        if self.progress not in PROGRESS_STYLES:
            raise ValueError(f"progress must be one of {', '.join(PROGRESS_STYLES)}")


@dataclass
class ExperimentResult:
    """Everything produced by :func:`run_experiment`."""

    network: NeuralNetwork
    training_set: DataSet
    test_set: DataSet
    normalizer: MaxNormalizer
    evaluation: Dict[str, Any]
    errors: List[float] = field(default_factory=list)


NetworkFactory = Callable[[ExperimentConfig], NeuralNetwork]
EvaluateFn = Callable[[NeuralNetwork, DataSet, ExperimentConfig], Dict[str, Any]]


def format_vector(values: Sequence[float] | np.ndarray) -> str:
    return "[" + ", ".join(repr(float(value)) for value in np.asarray(values).reshape(-1)) + "]"


def print_test_results(network: NeuralNetwork, dataset: DataSet) -> None:
    """Print input, network output and desired output for every row."""

    print("Showing inputs, desired output and neural network output for every row in test set.")
    for row in dataset:
        output = network.calculate(row.input)
        print(f"Input: {format_vector(row.input)}")
        print(f"Output: {format_vector(output)}")
        print(f"Desired output: {format_vector(row.desired_output)}")


def evaluate_regression(
    network: NeuralNetwork, dataset: DataSet, config: Optional[ExperimentConfig] = None
) -> Dict[str, Any]:
    """Print and return mean squared and mean absolute error on ``dataset``."""

    print("Calculating performance indicators for neural network.")
    mse = MeanSquaredError()
    mae = MeanAbsoluteError()
    outputs = network.predict(dataset.inputs) if len(dataset) else []
    for output, desired in zip(outputs, dataset.desired_outputs):
        mse.add_pattern_error(output, desired)
        mae.add_pattern_error(output, desired)

    print(f"Mean squared error is: {mse.total_error}")
    print(f"Mean absolute error is: {mae.total_error}")
    return {"mean_squared_error": mse.total_error, "mean_absolute_error": mae.total_error}


def evaluate_classification(
    network: NeuralNetwork, dataset: DataSet, labels: Sequence[str]
) -> Dict[str, Any]:
    """Print the confusion matrix and per-class metrics for ``dataset``."""

    if not labels:
        raise ValueError("classification requires class labels")
    print("Calculating performance indicators for neural network.")
    evaluation = Evaluation()
    evaluation.add_evaluator(ErrorEvaluator(MeanSquaredError()))
    evaluation.add_evaluator(MultiClassEvaluator(labels))
    results = evaluation.evaluate(network, dataset)

    confusion = results[MultiClassEvaluator]
    metrics = ClassificationMetrics.create_from_matrix(confusion)
    average = ClassificationMetrics.average(metrics)
    print(f"Mean squared error is: {results[ErrorEvaluator]}")
    print("Confusion matrix:")
    print()
    print(confusion)
    print()
    print("Classification metrics")
    print()
    for item in metrics:
        print(item)
        print()
    print(average)
    return {
        "mean_squared_error": results[ErrorEvaluator],
        "confusion_matrix": confusion,
        "metrics": metrics,
        "average": average,
    }


def configure_learning_rule(rule: SupervisedLearning, config: ExperimentConfig) -> SupervisedLearning:
    rule.learning_rate = config.learning_rate
    rule.max_error = config.max_error
    rule.max_iterations = config.max_iterations
    rule.batch_mode = config.batch_mode
    return rule


def progress_listener(style: str) -> Optional[LearningEventListener]:
    if style == "print":
        return ConsoleProgressListener()
    if style == "bar":
        return ProgressBarListener()
    return None


def run_experiment(
    config: ExperimentConfig,
    build_network: NetworkFactory,
    evaluate: EvaluateFn,
) -> ExperimentResult:
    """Load, split, normalize, train, evaluate, save and report."""

    print("Creating data set...")
    data_set = DataSet.create_from_file(
        config.data_path,
        config.input_count,
        config.output_count,
        delimiter=config.delimiter,
        skip_header=config.skip_header,
    )
    training_set, test_set = data_set.split(*config.split, seed=config.seed)

    normalizer = MaxNormalizer(training_set)
    normalizer.normalize(training_set)
    normalizer.normalize(test_set)

    print("Creating neural network...")
    if config.seed is not None:
        torch.manual_seed(config.seed)
    network = build_network(config)
    rule = network.learning_rule
    history = ErrorHistoryListener()
    rule.add_listener(history)
    listener = progress_listener(config.progress)
    if listener is not None:
        rule.add_listener(listener)

    print("Training network...")
    network.learn(training_set)
    print("Training completed.")

    print("Testing network...")
    print("Network performance on the test set")
    results = evaluate(network, test_set, config)

    if config.save_path:
        print(config.save_heading)
        network.save(config.save_path)
        print(f"Saved network to {Path(config.save_path)}")

    if config.plot_path:
        from ..utils.visualization import plot_error_history

        plot_error_history(history.errors, path=config.plot_path)
        print(f"Saved error plot to {config.plot_path}")

    if config.done_message:
        print(config.done_message)

    if config.show_outputs:
        print()
        print("Network outputs for test set")
        print_test_results(network, test_set)

    return ExperimentResult(
        network=network,
        training_set=training_set,
        test_set=test_set,
        normalizer=normalizer,
        evaluation=results,
        errors=history.errors,
    )


__all__ = [
    "ExperimentConfig",
    "ExperimentResult",
    "configure_learning_rule",
    "evaluate_classification",
    "evaluate_regression",
    "format_vector",
    "print_test_results",
    "progress_listener",
    "run_experiment",
]
