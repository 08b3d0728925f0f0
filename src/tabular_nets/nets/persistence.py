"""Restore networks written by :meth:`NeuralNetwork.save`."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Type

import torch

from ..learning.rules import rule_from_description
from .adaline import Adaline, AdalineConfig
from .base import NeuralNetwork
from .perceptron import MultiLayerPerceptron, MultiLayerPerceptronConfig

NETWORK_TYPES: Dict[str, Type[NeuralNetwork]] = {
    "Adaline": Adaline,
    "MultiLayerPerceptron": MultiLayerPerceptron,
}


def load_network(
    path: str | Path,
    *,
    device: Optional[torch.device | str] = None,
) -> NeuralNetwork:
    """Rebuild a network, its weights and its learning rule from a checkpoint."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Network file not found: {path}")
    checkpoint = torch.load(path, map_location="cpu")
    name = checkpoint.get("network")
    if name not in NETWORK_TYPES:
        raise ValueError(f"Unknown network type in {path}: {name!r}")

    config = checkpoint["config"]
    network: NeuralNetwork
    if name == "Adaline":
        network = Adaline.from_config(AdalineConfig(**config), device=device)
    else:
        network = MultiLayerPerceptron.from_config(
            MultiLayerPerceptronConfig(**config), device=device
        )
    network.load_state_dict(checkpoint["state_dict"])
    network.to(network.device)
    rule = checkpoint.get("learning_rule")
    if rule:
        network.set_learning_rule(rule_from_description(rule))
    network.eval()
    return network


__all__ = ["NETWORK_TYPES", "load_network"]
