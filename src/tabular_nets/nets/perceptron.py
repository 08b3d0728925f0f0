"""Multi-layer perceptron with a configurable transfer function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import torch
from torch import Tensor, nn

from ..learning.rules import BackPropagation
from .base import NeuralNetwork

TRANSFER_FUNCTIONS = {
    "sigmoid": nn.Sigmoid,
    "tanh": nn.Tanh,
    "linear": nn.Identity,
}


@dataclass(slots=True)
class MultiLayerPerceptronConfig:
    """Configuration for :class:`MultiLayerPerceptron`.

    ``layer_sizes`` lists the neuron count of every layer, input layer first
    and output layer last.
    """

    layer_sizes: Tuple[int, ...]
    transfer: str = "sigmoid"

    def __post_init__(self) -> None:
        self.layer_sizes = tuple(int(size) for size in self.layer_sizes)
        if len(self.layer_sizes) < 2:
            raise ValueError("layer_sizes needs at least an input and an output layer")
        if any(size <= 0 for size in self.layer_sizes):
            raise ValueError("layer sizes must be positive")
        if self.transfer not in TRANSFER_FUNCTIONS:
            choices = ", ".join(sorted(TRANSFER_FUNCTIONS))
            raise ValueError(f"transfer must be one of {choices}, got {self.transfer!r}")


class MultiLayerPerceptron(NeuralNetwork):
    """Fully connected feed-forward network.

    Every layer after the input applies a linear map with bias followed by the
    transfer function, the output layer included.
    """

    def __init__(
        self,
        *layer_sizes: int,
        transfer: str = "sigmoid",
        device: Optional[torch.device | str] = None,
    ) -> None:
        config = MultiLayerPerceptronConfig(layer_sizes=tuple(layer_sizes), transfer=transfer)
        super().__init__(config.layer_sizes[0], config.layer_sizes[-1], device=device)
        self.config = config
        activation = TRANSFER_FUNCTIONS[config.transfer]
        layers = []
        for fan_in, fan_out in zip(config.layer_sizes[:-1], config.layer_sizes[1:]):
            layers.append(nn.Linear(fan_in, fan_out))
            layers.append(activation())
        self.layers = nn.Sequential(*layers)
        self.to(self.device)
        self.set_learning_rule(BackPropagation())

    @classmethod
    def from_config(
        cls,
        config: MultiLayerPerceptronConfig,
        *,
        device: Optional[torch.device | str] = None,
    ) -> "MultiLayerPerceptron":
        return cls(*config.layer_sizes, transfer=config.transfer, device=device)

    @property
    def layer_sizes(self) -> Tuple[int, ...]:
        return self.config.layer_sizes

    def forward(self, inputs: Tensor) -> Tensor:
        return self.layers(inputs)


__all__ = ["MultiLayerPerceptron", "MultiLayerPerceptronConfig", "TRANSFER_FUNCTIONS"]
