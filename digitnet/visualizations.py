"""
Visualization Utilities
=======================

This module provides functions for:
- Rendering a flattened MNIST digit back into a grayscale image file
- Comparing per-epoch training accuracy of several networks
"""

import numpy as np
import matplotlib.pyplot as plt

from .utils import IMAGE_SIZE, MAX_PIXEL


def show_image(img, save_path='selected_img.png'):
    """
    Save a flattened digit as a 28x28 grayscale PNG.

    Args:
        img: Pixel values in [0, 1], shape (784,)
        save_path: Where to write the image

    Returns:
        The 28x28 uint8 pixel array that was written
    """
    img = np.asarray(img, dtype=np.float64)

    # Back to the original 0-255 intensities, row-major
    pixels = (img * MAX_PIXEL).astype(np.uint8).reshape(IMAGE_SIZE, IMAGE_SIZE)

    plt.imsave(save_path, pixels, cmap='gray', vmin=0, vmax=255)

    return pixels


def plot_accuracy_history(histories, figsize=(8, 5), save_path=None):
    """
    Plot training accuracy per epoch for several networks.

    Args:
        histories: Dictionary mapping network name to its history dictionary
        figsize: Figure size
        save_path: Path to save figure

    Returns:
        The matplotlib figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    for name, history in histories.items():
        epochs = range(1, len(history['accuracy']) + 1)
        ax.plot(epochs, history['accuracy'], marker='o', label=name, linewidth=2)

    ax.set_xlabel('Epoch', fontsize=12)
    ax.set_ylabel('Accuracy (%)', fontsize=12)
    ax.set_title('Training Accuracy by Activation Function', fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Accuracy plot saved to {save_path}")

    plt.close(fig)
    return fig
