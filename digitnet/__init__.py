"""
Activation Function Comparison on MNIST
=======================================

Single hidden layer neural networks written with NumPy only, trained on
MNIST with online gradient descent and hand-derived backpropagation.
Three networks share the same parameters and differ only in activation:
- Sigmoid
- Tanh
- Leaky ReLU with a softmax output layer
"""

from .activations import Sigmoid, Tanh, LeakyReLU, Softmax, get_activation
from .network import NeuralNetwork, SigmoidNetwork, TanhNetwork, ReluNetwork, get_network
from .utils import (argmax, if_correct, get_percentage, one_hot_encode,
                    read_csv, get_training_data, get_testing_data)
from .config import TrainingConfig
from . import visualizations

__version__ = "1.0.0"
__all__ = [
    # Activations
    'Sigmoid', 'Tanh', 'LeakyReLU', 'Softmax', 'get_activation',
    # Networks
    'NeuralNetwork', 'SigmoidNetwork', 'TanhNetwork', 'ReluNetwork', 'get_network',
    # Utilities
    'argmax', 'if_correct', 'get_percentage', 'one_hot_encode',
    'read_csv', 'get_training_data', 'get_testing_data',
    # Configuration
    'TrainingConfig',
]
