"""
Utility Functions for the Digit Networks
========================================

Helper functions for:
- Data loading (MNIST in CSV form)
- One-hot encoding
- Metrics (argmax, correctness, accuracy percentage)
"""

import numpy as np
from pathlib import Path

IMAGE_SIZE = 28
N_PIXELS = IMAGE_SIZE * IMAGE_SIZE
MAX_PIXEL = 255.0


def argmax(values):
    """
    Index of the largest element.

    Scans left to right and only moves on a strictly greater value, so the
    first occurrence of the maximum wins.

    Example:
        >>> argmax(np.array([0.1, 0.9, 0.9]))
        1
    """
    best_idx, best_val = 0, -np.inf
    for idx, val in enumerate(np.ravel(values)):
        if val > best_val:
            best_idx, best_val = idx, val
    return best_idx


def if_correct(output, label):
    """Whether the output column's top class matches the label column's."""
    return argmax(output[:, 0]) == argmax(label[:, 0])


def get_percentage(correct, total):
    """Percentage of correct guesses, e.g. 3 of 10 -> 30.0."""
    return correct / total * 100.0


def one_hot_encode(labels):
    """
    Convert integer labels to one-hot encoded rows.

    The number of columns is max(labels) + 1.

    Args:
        labels: Integer labels, shape (N,)

    Returns:
        One-hot matrix, shape (N, max(labels) + 1)
    """
    labels = np.asarray(labels).astype(int)

    num_classes = labels.max() + 1

    one_hot = np.zeros((len(labels), num_classes), dtype=np.float64)
    one_hot[np.arange(len(labels)), labels] = 1.0

    return one_hot


def read_csv(filepath, has_header=True):
    """
    Read a numeric CSV file into a 2-D float array.

    Args:
        filepath: Path to the CSV file
        has_header: Skip the first row

    Returns:
        Array of shape (rows, columns)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty or a row is not numeric
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"Could not find data file '{filepath}'")

    data = np.loadtxt(filepath, delimiter=',', skiprows=1 if has_header else 0,
                      dtype=np.float64, ndmin=2)

    if data.size == 0:
        raise ValueError(f"No rows found in '{filepath}'")

    return data


def _split_columns(data, filepath):
    """Split a dataset array into labels (column 0) and pixels scaled to [0, 1]."""
    if data.shape[1] != N_PIXELS + 1:
        raise ValueError(
            f"Expected {N_PIXELS + 1} columns (label + pixels) in '{filepath}', "
            f"got {data.shape[1]}"
        )

    labels = data[:, 0].astype(int)
    # Dividing by the max pixel value puts every pixel in [0, 1]
    pixels = data[:, 1:] / MAX_PIXEL

    return pixels, labels


def get_training_data(filepath, size=None):
    """
    Load training images and one-hot labels.

    Args:
        filepath: Path to the training CSV
        size: Number of images to take from the start of the file, None for all

    Returns:
        X: Pixel values in [0, 1], shape (size, 784)
        Y: One-hot labels, shape (size, max label + 1)
    """
    data = read_csv(filepath)
    if size is not None:
        data = data[:size]

    X, labels = _split_columns(data, filepath)
    Y = one_hot_encode(labels)

    return X, Y


def get_testing_data(filepath):
    """
    Load test images and their raw labels.

    Returns:
        X: Pixel values in [0, 1], shape (N, 784)
        y: Integer labels, shape (N,)
    """
    data = read_csv(filepath)
    return _split_columns(data, filepath)


def set_random_seed(seed):
    """Set random seed for reproducibility."""
    np.random.seed(seed)
    print(f"Random seed set to {seed}")
