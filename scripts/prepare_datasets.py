"""Download the UCI white wine quality data and convert it for training."""

from __future__ import annotations

import argparse
import urllib.request
from pathlib import Path

from tabular_nets.data import convert_wine_quality

WINE_QUALITY_URL = (
    "http://archive.ics.uci.edu/ml/machine-learning-databases/wine-quality/winequality-white.csv"
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Download and convert the wine quality dataset")
    parser.add_argument(
        "--out-dir",
        type=str,
        default="data_sets/ml10standard",
        help="Directory receiving the raw CSV and the converted file",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Use an already downloaded winequality-white.csv instead of fetching it",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Re-download even if the raw CSV already exists",
    )
    return parser.parse_args()


def download(url: str, destination: Path, force: bool = False) -> None:
    if destination.exists() and not force:
        print(f"Dataset already exists at {destination}, skipping download.")
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    print(f"Downloading {url} -> {destination}")
    with urllib.request.urlopen(url) as response, destination.open("wb") as handle:
        handle.write(response.read())
    print("Download complete.")


def main() -> None:
    args = parse_args()
    out_dir = Path(args.out_dir)
    if args.source:
        raw = Path(args.source)
    else:
        raw = out_dir / "winequality-white.csv"
        download(WINE_QUALITY_URL, raw, force=args.force)
    destination = out_dir / "wine.txt"
    rows = convert_wine_quality(raw, destination)
    print(f"Wrote {rows} rows to {destination}")


if __name__ == "__main__":
    main()
