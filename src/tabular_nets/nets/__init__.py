"""Feed-forward networks built on PyTorch modules."""

from .adaline import Adaline, AdalineConfig
from .base import NeuralNetwork
from .perceptron import MultiLayerPerceptron, MultiLayerPerceptronConfig
from .persistence import load_network

__all__ = [
    "Adaline",
    "AdalineConfig",
    "MultiLayerPerceptron",
    "MultiLayerPerceptronConfig",
    "NeuralNetwork",
    "load_network",
]
