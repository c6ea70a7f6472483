"""
Tests for Visualizations
========================
"""

import numpy as np
import matplotlib.pyplot as plt
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from digitnet.visualizations import show_image, plot_accuracy_history


class TestShowImage:
    """Tests for rendering a digit to a PNG."""

    def test_writes_28x28_image(self, tmp_path):
        path = tmp_path / "digit.png"
        img = np.linspace(0, 1, 784)

        pixels = show_image(img, save_path=str(path))

        assert path.exists()
        assert pixels.shape == (28, 28)
        assert pixels.dtype == np.uint8
        assert plt.imread(str(path)).shape[:2] == (28, 28)

    def test_pixel_values_rescaled(self, tmp_path):
        img = np.zeros(784)
        img[0] = 1.0
        img[29] = 0.5

        pixels = show_image(img, save_path=str(tmp_path / "digit.png"))

        assert pixels[0, 0] == 255
        # Row-major: index 29 is row 1, column 1
        assert pixels[1, 1] == 127
        assert pixels[27, 27] == 0

    def test_wrong_length(self, tmp_path):
        with pytest.raises(ValueError):
            show_image(np.zeros(100), save_path=str(tmp_path / "digit.png"))


class TestAccuracyPlot:
    """Tests for the accuracy comparison plot."""

    def test_saves_plot(self, tmp_path):
        path = tmp_path / "accuracy.png"
        histories = {
            "Sigmoid": {"accuracy": [60.0, 75.5, 80.1]},
            "ReLU": {"accuracy": [70.2, 85.0, 88.4]},
        }

        fig = plot_accuracy_history(histories, save_path=str(path))

        assert path.exists()
        assert len(fig.axes[0].lines) == 2


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
