"""
Single Hidden Layer Network
===========================

One network class ties everything together:
- Weight/bias storage and the two layer caches
- Forward propagation
- Backward propagation
- Online gradient descent over a dataset
- Prediction of a single image

Architecture:
    Input (784) -> Dense(20) -> activation -> Dense(10) -> output activation

Shape conventions:
    Images and labels travel through the network as column vectors,
    img: (input_size, 1), label: (num_classes, 1)

The three variants only differ in the activation objects they plug in:
    SigmoidNetwork: sigmoid hidden, sigmoid output
    TanhNetwork:    tanh hidden, tanh output
    ReluNetwork:    leaky ReLU hidden, softmax output
"""

import numpy as np
from tqdm import tqdm

from .activations import Sigmoid, Tanh, LeakyReLU, Softmax, get_activation
from .utils import argmax, if_correct, get_percentage


class NeuralNetwork:
    """
    Fully connected network with one hidden layer.

    Example:
        >>> from digitnet.network import ReluNetwork
        >>> from digitnet.utils import get_training_data
        >>> X, Y = get_training_data('mnist_data/mnist_train.csv', size=10000)
        >>> net = ReluNetwork()
        >>> history = net.gradient_descent(X, Y, epochs=3, learning_rate=0.01)
        >>> net.make_guess(X[0])
        5
    """

    def __init__(self, activation='sigmoid', output_activation=None,
                 input_size=784, hidden_size=20, num_classes=10, seed=None):
        """
        Initialize the network.

        Args:
            activation: Hidden layer activation (name or Activation instance)
            output_activation: Output layer activation, same as hidden if None
            input_size: Number of pixels per image
            hidden_size: Number of hidden units
            num_classes: Number of output classes
            seed: Seed for weight initialization, None uses numpy's global state
        """
        self.activation = get_activation(activation)
        if output_activation is None:
            self.output_activation = self.activation
        else:
            self.output_activation = get_activation(output_activation)

        self.input_size = input_size
        self.hidden_size = hidden_size
        self.num_classes = num_classes

        rng = np.random if seed is None else np.random.default_rng(seed)

        # Weights start uniform in [-0.5, 0.5), biases at zero
        self._hidden_weights = rng.uniform(-0.5, 0.5, (hidden_size, input_size))
        self._hidden_bias = np.zeros((hidden_size, 1))
        self._output_weights = rng.uniform(-0.5, 0.5, (num_classes, hidden_size))
        self._output_bias = np.zeros((num_classes, 1))

        # Layers stay empty until the first forward pass
        self._hidden_layer = np.empty((0, 0))
        self._output_layer = np.empty((0, 0))

    # ------------------------------------------------------------------
    # Stored matrices: reads hand out copies, writes replace wholesale
    # ------------------------------------------------------------------

    @property
    def hidden_weights(self):
        return self._hidden_weights.copy()

    @hidden_weights.setter
    def hidden_weights(self, value):
        self._hidden_weights = value

    @property
    def hidden_bias(self):
        return self._hidden_bias.copy()

    @hidden_bias.setter
    def hidden_bias(self, value):
        self._hidden_bias = value

    @property
    def hidden_layer(self):
        return self._hidden_layer.copy()

    @hidden_layer.setter
    def hidden_layer(self, value):
        self._hidden_layer = value

    @property
    def output_weights(self):
        return self._output_weights.copy()

    @output_weights.setter
    def output_weights(self, value):
        self._output_weights = value

    @property
    def output_bias(self):
        return self._output_bias.copy()

    @output_bias.setter
    def output_bias(self, value):
        self._output_bias = value

    @property
    def output_layer(self):
        return self._output_layer.copy()

    @output_layer.setter
    def output_layer(self, value):
        self._output_layer = value

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def forward_propagation(self, img):
        """
        Forward pass for one image.

        hidden = f(W_h @ img + b_h)
        output = g(W_o @ hidden + b_o)

        Args:
            img: Image column, shape (input_size, 1)
        """
        hid_calc = self._hidden_weights @ img + self._hidden_bias
        self.hidden_layer = self.activation.forward(hid_calc)

        out_calc = self._output_weights @ self._hidden_layer + self._output_bias
        self.output_layer = self.output_activation.forward(out_calc)

    def back_propagation(self, img, label, learning_rate):
        """
        Backward pass for one image, updating all weights and biases in place.

        The output error is output - label for every variant. That is the
        exact gradient only for softmax + cross-entropy; sigmoid and tanh
        networks train on the same error signal.

        The output weights are updated first, and the hidden error is
        computed from the already updated output weights.

        Args:
            img: Image column, shape (input_size, 1)
            label: One-hot label column, shape (num_classes, 1)
            learning_rate: Step size
        """
        hidden = self._hidden_layer

        delta_out = self._output_layer - label
        self.output_weights = self._output_weights - learning_rate * (delta_out @ hidden.T)
        self.output_bias = self._output_bias - learning_rate * delta_out

        # Uses the output weights from the line above
        delta_hid = (self._output_weights.T @ delta_out) * self.activation.backward(hidden)
        self.hidden_weights = self._hidden_weights - learning_rate * (delta_hid @ img.T)
        self.hidden_bias = self._hidden_bias - learning_rate * delta_hid

    def gradient_descent(self, X, Y, epochs, learning_rate, verbose=True):
        """
        Train with online gradient descent, one example at a time.

        Examples are visited in the order they are stored, every epoch.
        Accuracy for an epoch counts the guesses made before each update.

        Args:
            X: Images, shape (N, input_size)
            Y: One-hot labels, shape (N, num_classes)
            epochs: Number of passes over the data
            learning_rate: Step size
            verbose: Show a progress bar and print per-epoch accuracy

        Returns:
            History dictionary with the accuracy percentage of each epoch
        """
        X = np.asarray(X, dtype=np.float64)
        Y = np.asarray(Y, dtype=np.float64)

        if len(X) != len(Y):
            raise ValueError(f"X has {len(X)} rows but Y has {len(Y)}")

        history = {'accuracy': []}

        for epoch in range(epochs):
            correct = 0

            pairs = zip(X, Y)
            if verbose:
                pairs = tqdm(pairs, total=len(X), desc=f"Epoch {epoch+1}/{epochs}")

            for image, lab in pairs:
                img = image.reshape(-1, 1)
                label = lab.reshape(-1, 1)

                self.forward_propagation(img)
                correct += int(if_correct(self._output_layer, label))
                self.back_propagation(img, label, learning_rate)

            acc = get_percentage(correct, len(X))
            history['accuracy'].append(acc)

            if verbose:
                print(f"After Epoch {epoch+1}:")
                print(f"Accuracy: {acc:.3f}%")

        return history

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------

    def make_guess(self, image):
        """
        Guess which class an image belongs to.

        Args:
            image: Flat pixel vector, shape (input_size,)

        Returns:
            Predicted class index
        """
        img = np.asarray(image, dtype=np.float64).reshape(-1, 1)
        self.forward_propagation(img)
        return argmax(self._output_layer[:, 0])

    def __repr__(self):
        return (f"{type(self).__name__}(activation={self.activation!r}, "
                f"output_activation={self.output_activation!r}, "
                f"layers=({self.input_size}, {self.hidden_size}, {self.num_classes}))")


class SigmoidNetwork(NeuralNetwork):
    """Network using sigmoid on both layers."""

    def __init__(self, **kwargs):
        super().__init__(activation=Sigmoid(), **kwargs)


class TanhNetwork(NeuralNetwork):
    """Network using tanh on both layers."""

    def __init__(self, **kwargs):
        super().__init__(activation=Tanh(), **kwargs)


class ReluNetwork(NeuralNetwork):
    """Network using leaky ReLU on the hidden layer and softmax on the output."""

    def __init__(self, **kwargs):
        super().__init__(activation=LeakyReLU(0.01), output_activation=Softmax(), **kwargs)


# ====================================
# Network Registry
# ====================================

NETWORKS = {
    'sigmoid': SigmoidNetwork,
    'tanh': TanhNetwork,
    'relu': ReluNetwork,
}


def get_network(name, **kwargs):
    """
    Create a network variant by name.

    Args:
        name: 'sigmoid', 'tanh' or 'relu'
        **kwargs: Passed to the network constructor

    Returns:
        NeuralNetwork instance
    """
    name_lower = name.lower()
    if name_lower not in NETWORKS:
        available = ', '.join(NETWORKS.keys())
        raise ValueError(f"Unknown network '{name}'. Available: {available}")

    return NETWORKS[name_lower](**kwargs)
