"""Adaptive linear neuron."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import torch
from torch import Tensor, nn

from ..learning.rules import LMS
from .base import NeuralNetwork


@dataclass(slots=True)
class AdalineConfig:
    """Configuration for :class:`Adaline`."""

    input_count: int

    def __post_init__(self) -> None:
        if self.input_count <= 0:
            raise ValueError("input_count must be positive")


class Adaline(NeuralNetwork):
    """Single linear output neuron with bias, trained by least mean squares."""

    def __init__(
        self,
        input_count: int,
        *,
        device: Optional[torch.device | str] = None,
    ) -> None:
        super().__init__(input_count, 1, device=device)
        self.config = AdalineConfig(input_count=input_count)
        self.linear = nn.Linear(input_count, 1)
        self.to(self.device)
        self.set_learning_rule(LMS())

    @classmethod
    def from_config(
        cls, config: AdalineConfig, *, device: Optional[torch.device | str] = None
    ) -> "Adaline":
        return cls(config.input_count, device=device)

    def forward(self, inputs: Tensor) -> Tensor:
        return self.linear(inputs)


__all__ = ["Adaline", "AdalineConfig"]
