"""Column-wise dataset normalizers."""

from __future__ import annotations

from typing import Optional

import numpy as np
from sklearn.preprocessing import MaxAbsScaler

from .dataset import DataSet


class MaxNormalizer:
    """Scale every column by its maximum absolute value on a reference dataset.

    The maxima are taken once, from the dataset passed to the constructor
    (normally the training split). :meth:`normalize` then rescales any dataset
    of the same shape in place, so held-out rows are expressed in the units of
    the training data and may fall outside ``[-1, 1]``.
    """

    def __init__(self, dataset: DataSet) -> None:
        if len(dataset) == 0:
            raise ValueError("cannot fit a normalizer on an empty dataset")
        self.input_count = dataset.input_count
        self.output_count = dataset.output_count
        self._input_scaler = MaxAbsScaler().fit(dataset.inputs)
        self._output_scaler: Optional[MaxAbsScaler] = None
        if dataset.output_count:
            self._output_scaler = MaxAbsScaler().fit(dataset.desired_outputs)

    @property
    def max_inputs(self) -> np.ndarray:
        return self._input_scaler.max_abs_

    @property
    def max_outputs(self) -> np.ndarray:
        if self._output_scaler is None:
            return np.empty(0)
        return self._output_scaler.max_abs_

    def normalize(self, dataset: DataSet) -> DataSet:
        if dataset.input_count != self.input_count or dataset.output_count != self.output_count:
            raise ValueError(
                f"dataset shape ({dataset.input_count}, {dataset.output_count}) does not match "
                f"normalizer shape ({self.input_count}, {self.output_count})"
            )
        if len(dataset) == 0:
            return dataset
        dataset.inputs = self._input_scaler.transform(dataset.inputs)
        if self._output_scaler is not None:
            dataset.desired_outputs = self._output_scaler.transform(dataset.desired_outputs)
        return dataset

    def denormalize_outputs(self, values: np.ndarray) -> np.ndarray:
        """Map normalized output values back to the original units."""

        values = np.asarray(values, dtype=np.float64)
        if self._output_scaler is None:
            return values
        flat = values.reshape(-1, self.output_count)
        return self._output_scaler.inverse_transform(flat).reshape(values.shape)


__all__ = ["MaxNormalizer"]
