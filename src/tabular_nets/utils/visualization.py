"""Plotting utilities for training curves."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt


def plot_error_history(errors: Sequence[float], path: Optional[str | Path] = None):
    """Plot total network error across training iterations.

    When ``path`` is given the figure is written there and closed.
    """

    figure = plt.figure()
    plt.plot(range(1, len(errors) + 1), list(errors))
    plt.xlabel("Iteration")
    plt.ylabel("Total network error")
    plt.title("Training Error")
    plt.tight_layout()
    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        figure.savefig(path)
        plt.close(figure)
    return figure
