"""Accumulating error functions over network output patterns."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class ErrorFunction:
    """Running mean of an elementwise error over every pattern and output."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._total = 0.0
        self._value_count = 0
        self.pattern_count = 0

    def add_pattern_error(
        self,
        output: np.ndarray | Sequence[float],
        desired: np.ndarray | Sequence[float],
    ) -> np.ndarray:
        """Accumulate one pattern and return its raw error ``output - desired``."""

        output = np.asarray(output, dtype=np.float64).reshape(-1)
        desired = np.asarray(desired, dtype=np.float64).reshape(-1)
        if output.shape != desired.shape:
            raise ValueError(f"output width {output.size} != desired width {desired.size}")
        error = output - desired
        self._total += float(np.sum(self._pointwise(error)))
        self._value_count += error.size
        self.pattern_count += 1
        return error

    @property
    def total_error(self) -> float:
        if self._value_count == 0:
            return 0.0
        return self._total / self._value_count

    def _pointwise(self, error: np.ndarray) -> np.ndarray:  # pragma: no cover - abstract
        raise NotImplementedError


class MeanSquaredError(ErrorFunction):
    def _pointwise(self, error: np.ndarray) -> np.ndarray:
        return np.square(error)


class MeanAbsoluteError(ErrorFunction):
    def _pointwise(self, error: np.ndarray) -> np.ndarray:
        return np.abs(error)


__all__ = ["ErrorFunction", "MeanAbsoluteError", "MeanSquaredError"]
