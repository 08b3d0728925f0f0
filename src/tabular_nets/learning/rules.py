"""Supervised learning rules driving gradient descent on a network."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Type

import torch
from torch import Tensor

from .events import LearningEvent, LearningEventListener, LearningEventType

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from ..data.dataset import DataSet
    from ..nets.base import NeuralNetwork


class SupervisedLearning:
    """Iterative error-driven training of a network against desired outputs.

    One iteration is a full pass over the training set. In online mode the
    weights move after every row; in batch mode the row gradients are summed
    and applied once per pass. Learning stops when the total network error of
    an iteration drops below ``max_error``, when ``max_iterations`` passes have
    run, or when :meth:`stop` is called.
    """

    def __init__(
        self,
        *,
        learning_rate: float = 0.1,
        max_error: float = 0.01,
        max_iterations: int = 10_000,
        batch_mode: bool = False,
    ) -> None:
        self.learning_rate = learning_rate
        self.max_error = max_error
        self.max_iterations = max_iterations
        self.batch_mode = batch_mode
        self.listeners: List[LearningEventListener] = []
        self.current_iteration = 0
        self.total_network_error = math.inf
        self._stop_requested = False

    # ------------------------------------------------------------------
    # Hyperparameters
    # ------------------------------------------------------------------
    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        if value <= 0:
            raise ValueError("learning_rate must be positive")
        self._learning_rate = float(value)

    @property
    def max_error(self) -> float:
        return self._max_error

    @max_error.setter
    def max_error(self, value: float) -> None:
        if value < 0:
            raise ValueError("max_error must be non-negative")
        self._max_error = float(value)

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        if value <= 0:
            raise ValueError("max_iterations must be positive")
        self._max_iterations = int(value)

    def describe(self) -> Dict[str, Any]:
        return {
            "name": type(self).__name__,
            "learning_rate": self.learning_rate,
            "max_error": self.max_error,
            "max_iterations": self.max_iterations,
            "batch_mode": self.batch_mode,
        }

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, listener: LearningEventListener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: LearningEventListener) -> None:
        self.listeners.remove(listener)

    def _fire(self, event_type: LearningEventType) -> None:
        event = LearningEvent(source=self, event_type=event_type)
        for listener in list(self.listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Training loop
    # ------------------------------------------------------------------
    def stop(self) -> None:
        """Ask the running :meth:`learn` call to finish after the current iteration."""

        self._stop_requested = True

    @property
    def is_stopped(self) -> bool:
        return self._stop_requested

    def build_optimizer(self, parameters: Iterable[Tensor]) -> torch.optim.Optimizer:
        return torch.optim.SGD(parameters, lr=self.learning_rate)

    def learn(self, network: "NeuralNetwork", training_set: "DataSet") -> None:
        if len(training_set) == 0:
            raise ValueError("training set is empty")
        if training_set.input_count != network.input_count:
            raise ValueError(
                f"training set has {training_set.input_count} inputs, "
                f"network expects {network.input_count}"
            )
        if training_set.output_count != network.output_count:
            raise ValueError(
                f"training set has {training_set.output_count} outputs, "
                f"network produces {network.output_count}"
            )

        self.current_iteration = 0
        self.total_network_error = math.inf
        self._stop_requested = False

        inputs = torch.as_tensor(training_set.inputs, dtype=torch.float32, device=network.device)
        targets = torch.as_tensor(
            training_set.desired_outputs, dtype=torch.float32, device=network.device
        )
        optimizer = self.build_optimizer(network.parameters())

        network.train()
        try:
            while True:
                if self.batch_mode:
                    squared = self._batch_pass(network, optimizer, inputs, targets)
                else:
                    squared = self._online_pass(network, optimizer, inputs, targets)
                self.total_network_error = squared / targets.numel()
                self.current_iteration += 1
                self._fire(LearningEventType.EPOCH_ENDED)
                if self._has_reached_stop_condition():
                    break
        finally:
            # also reached when a pass or a listener raises
            network.eval()
            self._stop_requested = True
            self._fire(LearningEventType.LEARNING_STOPPED)

    def _has_reached_stop_condition(self) -> bool:
        return (
            self._stop_requested
            or self.total_network_error < self.max_error
            or self.current_iteration >= self.max_iterations
        )

    def _online_pass(
        self,
        network: "NeuralNetwork",
        optimizer: torch.optim.Optimizer,
        inputs: Tensor,
        targets: Tensor,
    ) -> float:
        total = torch.zeros((), device=inputs.device)
        for index in range(inputs.size(0)):
            optimizer.zero_grad()
            errors = network(inputs[index : index + 1]) - targets[index : index + 1]
            loss = 0.5 * errors.pow(2).sum()
            loss.backward()
            optimizer.step()
            total += errors.detach().pow(2).sum()
        return float(total.item())

    def _batch_pass(
        self,
        network: "NeuralNetwork",
        optimizer: torch.optim.Optimizer,
        inputs: Tensor,
        targets: Tensor,
    ) -> float:
        optimizer.zero_grad()
        errors = network(inputs) - targets
        loss = 0.5 * errors.pow(2).sum()
        loss.backward()
        optimizer.step()
        return float(errors.detach().pow(2).sum().item())


class LMS(SupervisedLearning):
    """Least mean squares (Widrow-Hoff) rule for linear networks."""


class BackPropagation(LMS):
    """Error backpropagation through every layer of a multilayer network."""


class MomentumBackpropagation(BackPropagation):
    """Backpropagation whose weight change keeps a fraction of the previous one."""

    def __init__(self, *, momentum: float = 0.25, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if not 0.0 <= momentum < 1.0:
            raise ValueError("momentum must lie in [0, 1)")
        self.momentum = momentum

    def build_optimizer(self, parameters: Iterable[Tensor]) -> torch.optim.Optimizer:
        return torch.optim.SGD(parameters, lr=self.learning_rate, momentum=self.momentum)

    def describe(self) -> Dict[str, Any]:
        return {**super().describe(), "momentum": self.momentum}


LEARNING_RULES: Dict[str, Type[SupervisedLearning]] = {
    "LMS": LMS,
    "BackPropagation": BackPropagation,
    "MomentumBackpropagation": MomentumBackpropagation,
}


def rule_from_description(description: Dict[str, Any]) -> SupervisedLearning:
    """Recreate a learning rule from the output of :meth:`SupervisedLearning.describe`."""

    settings = dict(description)
    name = settings.pop("name", None)
    if name not in LEARNING_RULES:
        raise ValueError(f"Unknown learning rule: {name!r}")
    return LEARNING_RULES[name](**settings)


__all__ = [
    "BackPropagation",
    "LEARNING_RULES",
    "LMS",
    "MomentumBackpropagation",
    "SupervisedLearning",
    "rule_from_description",
]
