"""Adaline regression on the Swedish auto insurance dataset.

The dataset (Swedish Committee on Analysis of Risk Premium in Motor Insurance)
has 63 rows of two numeric columns: the number of claims in a geographical
zone and the total payment for those claims in thousands of Swedish Kronor.
The network predicts the payment from the claim count.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from ..nets import Adaline
from .runner import (
    ExperimentConfig,
    ExperimentResult,
    configure_learning_rule,
    evaluate_regression,
    run_experiment,
)

DATA_PATH = "data_sets/ml10standard/autodata.txt"


def default_config(**overrides: Any) -> ExperimentConfig:
    config = ExperimentConfig(
        data_path=DATA_PATH,
        input_count=1,
        output_count=1,
        delimiter=",",
        skip_header=False,
    )
    return replace(config, **overrides) if overrides else config


def build_network(config: ExperimentConfig) -> Adaline:
    network = Adaline(config.input_count, device=config.device)
    configure_learning_rule(network.learning_rule, config)
    return network


def run(config: Optional[ExperimentConfig] = None) -> ExperimentResult:
    return run_experiment(config or default_config(), build_network, evaluate_regression)


__all__ = ["DATA_PATH", "build_network", "default_config", "run"]
