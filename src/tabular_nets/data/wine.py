"""Conversion of the UCI white wine quality CSV into a one-hot training file."""

from __future__ import annotations

import csv
from pathlib import Path

from .dataset import DataSetError

QUALITY_CLASSES = 10
FEATURE_COUNT = 11


def convert_wine_quality(source: str | Path, destination: str | Path) -> int:
    """Rewrite ``winequality-white.csv`` as a tab-delimited one-hot dataset.

    The output keeps the 11 chemical measurements and replaces the quality
    score ``q`` with ten indicator columns, column ``q`` being set. Returns the
    number of data rows written.
    """

    source = Path(source)
    destination = Path(destination)
    if not source.exists():
        raise FileNotFoundError(f"Wine quality CSV not found: {source}")

    destination.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with source.open("r", newline="", encoding="utf-8") as src, destination.open(
        "w", newline="", encoding="utf-8"
    ) as dst:
        reader = csv.reader(src, delimiter=";")
        writer = csv.writer(dst, delimiter="\t", lineterminator="\n")
        header = next(reader, None)
        if header is None:
            raise DataSetError(f"{source}: file is empty")
        features = [name.strip() for name in header[:FEATURE_COUNT]]
        writer.writerow(features + [f"quality_{q}" for q in range(1, QUALITY_CLASSES + 1)])
        for line_number, row in enumerate(reader, start=2):
            if not row or not any(cell.strip() for cell in row):
                continue
            if len(row) != FEATURE_COUNT + 1:
                raise DataSetError(
                    f"{source}:{line_number}: expected {FEATURE_COUNT + 1} values, found {len(row)}"
                )
            try:
                measurements = [float(cell) for cell in row[:FEATURE_COUNT]]
                quality = int(float(row[FEATURE_COUNT]))
            except ValueError as exc:
                raise DataSetError(f"{source}:{line_number}: {exc}") from exc
            if not 1 <= quality <= QUALITY_CLASSES:
                raise DataSetError(f"{source}:{line_number}: quality {quality} outside 1..10")
            one_hot = [0] * QUALITY_CLASSES
            one_hot[quality - 1] = 1
            writer.writerow([repr(value) for value in measurements] + one_hot)
            written += 1
    return written


__all__ = ["FEATURE_COUNT", "QUALITY_CLASSES", "convert_wine_quality"]
