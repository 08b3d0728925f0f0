"""Dataset loading, splitting and normalization."""

from .dataset import DataSet, DataSetError, DataSetRow
from .normalization import MaxNormalizer
from .wine import convert_wine_quality

__all__ = [
    "DataSet",
    "DataSetError",
    "DataSetRow",
    "MaxNormalizer",
    "convert_wine_quality",
]
