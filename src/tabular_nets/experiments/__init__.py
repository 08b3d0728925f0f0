"""The two example training programs and the sequence they share."""

from . import swedish_auto_insurance, wine_quality
from .runner import (
    ExperimentConfig,
    ExperimentResult,
    evaluate_classification,
    evaluate_regression,
    print_test_results,
    run_experiment,
)

__all__ = [
    "ExperimentConfig",
    "ExperimentResult",
    "evaluate_classification",
    "evaluate_regression",
    "print_test_results",
    "run_experiment",
    "swedish_auto_insurance",
    "wine_quality",
]
