#!/usr/bin/env python3
"""Train an Adaline to predict Swedish auto insurance claim payments."""
from __future__ import annotations

import argparse

from tabular_nets.experiments import swedish_auto_insurance


def parse_args() -> argparse.Namespace:
    defaults = swedish_auto_insurance.default_config()
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--data-path", type=str, default=defaults.data_path)
    p.add_argument("--split", type=float, nargs=2, default=list(defaults.split), metavar=("TRAIN", "TEST"))
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--learning-rate", type=float, default=defaults.learning_rate)
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
    config = swedish_auto_insurance.default_config(
        data_path=args.data_path,
        split=tuple(args.split),
        seed=args.seed,
        learning_rate=args.learning_rate,
        max_error=args.max_error,
        max_iterations=args.max_iterations,
        batch_mode=args.batch_mode,
        save_path=args.save_path,
        device=args.device,
        progress=args.progress,
        plot_path=args.plot_path,
        show_outputs=not args.no_outputs,
    )
    swedish_auto_insurance.run(config)


if __name__ == "__main__":
    main()
