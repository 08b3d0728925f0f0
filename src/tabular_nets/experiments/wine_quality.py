"""Multi-layer perceptron classification of white wine quality.

Eleven chemical measurements (fixed acidity, volatile acidity, citric acid,
residual sugar, chlorides, free and total sulfur dioxide, density, pH,
sulphates, alcohol) are mapped to one of ten quality classes. The data file
holds a header row, the measurements, and a one-hot encoding of the quality
score; ``scripts/prepare_datasets.py`` produces it from the UCI
``winequality-white.csv`` (Cortez et al., 2009; 4898 wines).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional

from ..data import DataSet
from ..learning import MomentumBackpropagation
from ..nets import MultiLayerPerceptron
from .runner import (
    ExperimentConfig,
    ExperimentResult,
    configure_learning_rule,
    evaluate_classification,
    run_experiment,
)

DATA_PATH = "data_sets/ml10standard/wine.txt"
CLASS_LABELS = tuple(str(label) for label in range(1, 11))


def default_config(**overrides: Any) -> ExperimentConfig:
    config = ExperimentConfig(
        data_path=DATA_PATH,
        input_count=11,
        output_count=len(CLASS_LABELS),
        delimiter="\t",
        skip_header=True,
        learning_rate=0.1,
        max_iterations=5000,
        hidden_layers=(20, 15),
        class_labels=CLASS_LABELS,
        save_heading="Saving network",
        done_message="Done.",
    )
    return replace(config, **overrides) if overrides else config


def build_network(config: ExperimentConfig) -> MultiLayerPerceptron:
    network = MultiLayerPerceptron(
        config.input_count,
        *config.hidden_layers,
        config.output_count,
        device=config.device,
    )
    network.set_learning_rule(MomentumBackpropagation(momentum=config.momentum))
    configure_learning_rule(network.learning_rule, config)
    return network


def evaluate(network: MultiLayerPerceptron, dataset: DataSet, config: ExperimentConfig) -> Dict[str, Any]:
    return evaluate_classification(network, dataset, config.class_labels)


def run(config: Optional[ExperimentConfig] = None) -> ExperimentResult:
    return run_experiment(config or default_config(), build_network, evaluate)


__all__ = ["CLASS_LABELS", "DATA_PATH", "build_network", "default_config", "evaluate", "run"]
