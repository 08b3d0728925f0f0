"""Tabular datasets of numeric input vectors paired with desired outputs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import numpy as np


class DataSetError(ValueError):
    """Raised when a dataset file or row cannot be interpreted."""


@dataclass(frozen=True, slots=True)
class DataSetRow:
    """Single training example."""

    input: np.ndarray
    desired_output: np.ndarray


class DataSet:
    """Rows of fixed-width numeric inputs and desired outputs."""

    def __init__(
        self,
        input_count: int,
        output_count: int = 0,
        *,
        inputs: Optional[np.ndarray] = None,
        desired_outputs: Optional[np.ndarray] = None,
        column_names: Optional[Sequence[str]] = None,
        label: Optional[str] = None,
    ) -> None:
        if input_count <= 0:
            raise ValueError("input_count must be positive")
        if output_count < 0:
            raise ValueError("output_count must be non-negative")
        self._input_count = input_count
        self._output_count = output_count
        if inputs is None:
            inputs = np.empty((0, input_count), dtype=np.float64)
        inputs = np.asarray(inputs, dtype=np.float64)
        if inputs.ndim == 1:
            inputs = inputs.reshape(-1, input_count)
        if inputs.ndim != 2 or inputs.shape[1] != input_count:
            raise ValueError(f"inputs must have {input_count} columns, got shape {inputs.shape}")
        if desired_outputs is None:
            if output_count and len(inputs):
                raise ValueError("desired_outputs are required when output_count is positive")
            desired_outputs = np.zeros((len(inputs), output_count), dtype=np.float64)
        desired_outputs = np.asarray(desired_outputs, dtype=np.float64)
        if desired_outputs.ndim == 1 and output_count:
            desired_outputs = desired_outputs.reshape(-1, output_count)
        if desired_outputs.ndim != 2 or desired_outputs.shape[1] != output_count:
            raise ValueError(f"desired_outputs must have {output_count} columns")
        if len(inputs) != len(desired_outputs):
            raise ValueError("inputs and desired_outputs must have the same number of rows")
        self.inputs = inputs
        self.desired_outputs = desired_outputs
        self.column_names = list(column_names) if column_names is not None else None
        self.label = label

    @classmethod
    def create_from_file(
        cls,
        path: str | Path,
        input_count: int,
        output_count: int,
        delimiter: str = ",",
        skip_header: bool = False,
    ) -> "DataSet":
        """Parse a delimited text file into a dataset.

        Each non-blank line holds ``input_count`` input columns followed by
        ``output_count`` output columns. With ``skip_header`` the first
        non-blank line is kept as :attr:`column_names` instead of data.
        """

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Data set file not found: {path}")
        if input_count <= 0:
            raise ValueError("input_count must be positive")
        if output_count < 0:
            raise ValueError("output_count must be non-negative")

        width = input_count + output_count
        column_names: Optional[List[str]] = None
        values: List[List[float]] = []
        with path.open("r", encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                fields = [field.strip() for field in line.rstrip("\r\n").split(delimiter)]
                if skip_header and column_names is None and not values:
                    column_names = fields
                    continue
                if len(fields) != width:
                    raise DataSetError(
                        f"{path}:{line_number}: expected {width} values, found {len(fields)}"
                    )
                try:
                    values.append([float(field) for field in fields])
                except ValueError as exc:
                    raise DataSetError(f"{path}:{line_number}: {exc}") from exc

        if not values:
            raise DataSetError(f"{path}: no data rows found")
        table = np.asarray(values, dtype=np.float64)
        return cls(
            input_count,
            output_count,
            inputs=table[:, :input_count],
            desired_outputs=table[:, input_count:],
            column_names=column_names,
            label=path.stem,
        )

    @property
    def input_count(self) -> int:
        return self._input_count

    @property
    def output_count(self) -> int:
        return self._output_count

    @property
    def rows(self) -> List[DataSetRow]:
        return list(iter(self))

    def __len__(self) -> int:
        return len(self.inputs)

    def __iter__(self) -> Iterator[DataSetRow]:
        for x, y in zip(self.inputs, self.desired_outputs):
            yield DataSetRow(x, y)

    def __getitem__(self, index: int) -> DataSetRow:
        return DataSetRow(self.inputs[index], self.desired_outputs[index])

    def __repr__(self) -> str:
        return (
            f"DataSet(rows={len(self)}, inputs={self.input_count}, "
            f"outputs={self.output_count})"
        )

    def add_row(self, input: Sequence[float], desired_output: Sequence[float] = ()) -> None:
        x = np.asarray(input, dtype=np.float64).reshape(-1)
        y = np.asarray(desired_output, dtype=np.float64).reshape(-1)
        if x.size != self.input_count:
            raise ValueError(f"input width {x.size} != input_count {self.input_count}")
        if y.size != self.output_count:
            raise ValueError(f"output width {y.size} != output_count {self.output_count}")
        self.inputs = np.vstack([self.inputs, x[None, :]])
        self.desired_outputs = np.vstack([self.desired_outputs, y[None, :]])

    def copy(self) -> "DataSet":
        return self._subset(np.arange(len(self)), label=self.label)

    def split(
        self,
        *parts: float,
        seed: Optional[int] = None,
        shuffle: bool = True,
    ) -> List["DataSet"]:
        """Split rows into new datasets sized by the given fractions."""

        if not parts:
            raise ValueError("at least one split fraction is required")
        if any(part <= 0 for part in parts):
            raise ValueError("split fractions must be positive")
        if not math.isclose(sum(parts), 1.0, abs_tol=1e-6):
            raise ValueError(f"split fractions must sum to 1, got {sum(parts)}")

        count = len(self)
        order = np.arange(count)
        if shuffle:
            order = np.random.default_rng(seed).permutation(count)

        subsets: List[DataSet] = []
        start = 0
        for index, part in enumerate(parts):
            if index == len(parts) - 1:
                stop = count
            else:
                stop = min(count, start + int(round(count * part)))
            suffix = f"part{index + 1}"
            label = f"{self.label}-{suffix}" if self.label else suffix
            subsets.append(self._subset(order[start:stop], label=label))
            start = stop
        return subsets

    def _subset(self, indices: np.ndarray, *, label: Optional[str]) -> "DataSet":
        return DataSet(
            self.input_count,
            self.output_count,
            inputs=self.inputs[indices].copy(),
            desired_outputs=self.desired_outputs[indices].copy(),
            column_names=self.column_names,
            label=label,
        )


__all__ = ["DataSet", "DataSetError", "DataSetRow"]
