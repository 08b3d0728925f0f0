"""Small neural-network training examples on tabular data.

The package wraps PyTorch and scikit-learn in the vocabulary of classic
neural-network toolkits:

- delimited-file datasets with train/test splits and max normalization,
- Adaline and multi-layer perceptron networks,
- LMS and (momentum) backpropagation learning rules with progress listeners,
- error, confusion-matrix and classification-metric evaluation.
"""

__version__ = "0.1.0"

__all__ = [
    "data",
    "evaluation",
    "experiments",
    "learning",
    "nets",
    "utils",
]
