# tests/conftest.py
import os
import sys

# Headless matplotlib so tests never open a window
os.environ.setdefault("MPLBACKEND", "Agg")

# Ensure project root is importable (so digitnet.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pytest


@pytest.fixture
def mnist_csv(tmp_path):
    """Write a small MNIST-style CSV (header + rows of label, 784 pixels) and return its path."""
    def make(labels, name="mnist.csv", header=True):
        rng = np.random.default_rng(0)
        rows = []
        for label in labels:
            pixels = rng.integers(0, 256, 784)
            rows.append(",".join(str(v) for v in [label, *pixels]))
        lines = []
        if header:
            lines.append(",".join(["label"] + [f"{r}x{c}" for r in range(1, 29) for c in range(1, 29)]))
        lines.extend(rows)
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path
    return make
