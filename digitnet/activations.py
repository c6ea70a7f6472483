"""
Activation Functions for the Digit Networks
===========================================

Each hidden layer applies one of these element-wise. Every activation
implements forward() for the forward pass and backward() for the
derivative used during backpropagation.

The backward() methods are applied to the CACHED HIDDEN LAYER, i.e. to values
that have already gone through forward(). Each class documents what that
means for its derivative formula.

Variants compared:
- Sigmoid: squashes to (0, 1)
- Tanh: squashes to (-1, 1)
- LeakyReLU: keeps a small slope for negative inputs
- Softmax: output layer only, turns a column of scores into probabilities
"""

import numpy as np


class Activation:
    """Base class for all activation functions."""

    def forward(self, x):
        """Apply activation function."""
        raise NotImplementedError

    def backward(self, x):
        """Compute derivative of activation for the cached layer values."""
        raise NotImplementedError

    def __call__(self, x):
        return self.forward(x)

    def __repr__(self):
        return f"{type(self).__name__}()"


class Sigmoid(Activation):
    """
    Sigmoid: f(x) = 1 / (1 + exp(-x))

    Derivative shortcut:
        f'(x) = a * (1 - a)   where a = f(x)

    backward() expects the already activated value a, not the raw x.
    Passing pre-activation values gives wrong gradients.
    """

    def forward(self, x):
        # Clip so exp() cannot overflow
        x_clipped = np.clip(x, -500, 500)
        return 1.0 / (1.0 + np.exp(-x_clipped))

    def backward(self, a):
        return a * (1.0 - a)


class Tanh(Activation):
    """
    Hyperbolic Tangent: f(x) = tanh(x)

    Output range: (-1, 1)

    Derivative:
        f'(v) = 1 - tanh(v)^2

    tanh is applied again to whatever backward() receives, including the
    cached hidden layer.
    """

    def forward(self, x):
        return np.tanh(x)

    def backward(self, v):
        t = np.tanh(v)
        return 1.0 - t ** 2


class LeakyReLU(Activation):
    """
    Leaky ReLU: f(x) = x if x > 0 else alpha * x

    Args:
        alpha: Slope for non-positive values (default: 0.01)

    Derivative:
        f'(x) = 1 if x > 0 else alpha
    """

    def __init__(self, alpha=0.01):
        self.alpha = alpha

    def forward(self, x):
        return np.where(x > 0, x, self.alpha * x)

    def backward(self, x):
        return np.where(x > 0, 1.0, self.alpha)

    def __repr__(self):
        return f"LeakyReLU(alpha={self.alpha})"


class Softmax(Activation):
    """
    Softmax over each column: f(x_i) = exp(x_i) / sum(exp(x_j))

    Layers here are column vectors of shape (classes, 1), so the
    normalization runs along axis 0.

    Numerical Stability:
        The column max is subtracted before exp. This leaves the result
        unchanged and keeps exp() from overflowing on large scores.

    backward() is not used for training: the network's output error
    output - label is already the softmax + cross-entropy gradient.
    """

    def forward(self, x):
        x_shifted = x - np.max(x, axis=0, keepdims=True)
        exp_x = np.exp(x_shifted)
        return exp_x / np.sum(exp_x, axis=0, keepdims=True)

    def backward(self, x):
        """Diagonal of the softmax Jacobian, s * (1 - s)."""
        s = self.forward(x)
        return s * (1.0 - s)


# ====================================
# Activation Registry
# ====================================

ACTIVATIONS = {
    'sigmoid': Sigmoid,
    'logistic': Sigmoid,
    'tanh': Tanh,
    'leaky_relu': LeakyReLU,
    'leakyrelu': LeakyReLU,
    'relu': LeakyReLU,
    'softmax': Softmax,
}


def get_activation(name):
    """
    Get activation function by name.

    Args:
        name: String name ('sigmoid', 'tanh', ...) or Activation instance

    Returns:
        Activation instance

    Example:
        >>> act = get_activation('leaky_relu')
        >>> act(np.array([-5.0, 5.0]))
        array([-0.05,  5.  ])
    """
    if isinstance(name, Activation):
        return name

    name_lower = name.lower().replace('-', '_')
    if name_lower not in ACTIVATIONS:
        available = ', '.join(ACTIVATIONS.keys())
        raise ValueError(f"Unknown activation '{name}'. Available: {available}")

    return ACTIVATIONS[name_lower]()
