#!/usr/bin/env python3
"""Train a multi-layer perceptron to classify white wine quality."""
from __future__ import annotations

import argparse

from tabular_nets.experiments import wine_quality


def parse_args() -> argparse.Namespace:
    defaults = wine_quality.default_config()
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument(
        "--data-path",
        type=str,
        default=defaults.data_path,
        help="Tab-delimited one-hot wine file (see scripts/prepare_datasets.py)",
    )
    p.add_argument("--split", type=float, nargs=2, default=list(defaults.split), metavar=("TRAIN", "TEST"))
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--hidden-layers", type=int, nargs="+", default=list(defaults.hidden_layers))
    p.add_argument("--learning-rate", type=float, default=defaults.learning_rate)
    p.add_argument("--momentum", type=float, default=defaults.momentum)
    p.add_argument("--max-error", type=float, default=defaults.max_error)
    p.add_argument("--max-iterations", type=int, default=defaults.max_iterations)
    p.add_argument("--batch-mode", action="store_true")
    p.add_argument("--save-path", type=str, default=defaults.save_path)
    p.add_argument("--device", type=str, default=None)
    p.add_argument("--progress", type=str, default=defaults.progress, choices=["print", "bar", "none"])
    p.add_argument("--plot-path", type=str, default=None)
    p.add_argument("--no-outputs", action="store_true", help="Skip the per-row test output listing")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    config = wine_quality.default_config(
        data_path=args.data_path,
        split=tuple(args.split),
        seed=args.seed,
        hidden_layers=tuple(args.hidden_layers),
        learning_rate=args.learning_rate,
        momentum=args.momentum,
        max_error=args.max_error,
        max_iterations=args.max_iterations,
        batch_mode=args.batch_mode,
        save_path=args.save_path,
        device=args.device,
        progress=args.progress,
        plot_path=args.plot_path,
        show_outputs=not args.no_outputs,
    )
    wine_quality.run(config)


if __name__ == "__main__":
    main()
