"""Common behaviour shared by the feed-forward networks."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import numpy as np
import torch
from torch import Tensor, nn

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from ..data.dataset import DataSet
    from ..learning.rules import SupervisedLearning


class NeuralNetwork(nn.Module):
    """Feed-forward network with an attached learning rule.

    Subclasses build their layers in ``__init__`` and implement
    :meth:`forward`. Inputs and outputs at the public API are NumPy arrays;
    tensors only appear inside the learning rules.
    """

    def __init__(
        self,
        input_count: int,
        output_count: int,
        *,
        device: Optional[torch.device | str] = None,
    ) -> None:
        super().__init__()
        if input_count <= 0:
            raise ValueError("input_count must be positive")
        if output_count <= 0:
            raise ValueError("output_count must be positive")
        self.input_count = input_count
        self.output_count = output_count
        self.device = torch.device(device or ("cuda" if torch.cuda.is_available() else "cpu"))
        self._learning_rule: Optional["SupervisedLearning"] = None

    @property
    def learning_rule(self) -> "SupervisedLearning":
        if self._learning_rule is None:
            raise RuntimeError(f"{type(self).__name__} has no learning rule")
        return self._learning_rule

    def set_learning_rule(self, rule: "SupervisedLearning") -> None:
        self._learning_rule = rule

    def learn(self, training_set: "DataSet") -> None:
        """Train with the attached learning rule until it stops."""

        self.learning_rule.learn(self, training_set)

    @torch.no_grad()
    def predict(self, inputs: np.ndarray | Sequence[Sequence[float]]) -> np.ndarray:
        """Return network outputs for a 2-D batch of input rows."""

        batch = np.asarray(inputs, dtype=np.float64)
        if batch.ndim != 2 or batch.shape[1] != self.input_count:
            raise ValueError(f"inputs must have shape (rows, {self.input_count})")
        self.eval()
        tensor = torch.as_tensor(batch, dtype=torch.float32, device=self.device)
        return self.forward(tensor).cpu().numpy().astype(np.float64)

    def calculate(self, input: np.ndarray | Sequence[float]) -> np.ndarray:
        """Return the output vector for a single input row."""

        row = np.asarray(input, dtype=np.float64).reshape(1, -1)
        return self.predict(row)[0]

    def forward(self, inputs: Tensor) -> Tensor:  # pragma: no cover - abstract
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        return asdict(self.config)  # type: ignore[attr-defined]

    def save(self, path: str | Path) -> None:
        """Persist configuration, weights and learning rule settings."""

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        checkpoint = {
            "network": type(self).__name__,
            "config": self.describe(),
            "state_dict": {key: value.cpu() for key, value in self.state_dict().items()},
            "learning_rule": self._learning_rule.describe() if self._learning_rule else None,
        }
        torch.save(checkpoint, path)


__all__ = ["NeuralNetwork"]
