#!/usr/bin/env python3
"""
CLI Entry Point: Compare Activation Functions on MNIST
======================================================

Trains a sigmoid, a tanh and a leaky ReLU network with the same parameters,
then lets you pick test images and see what each network guesses.

Usage examples::

    digitnet
    digitnet --epochs 5 --lr 0.02 --quantity 20000 --plot accuracy.png
"""

import argparse
import sys

from .config import TrainingConfig
from .network import SigmoidNetwork, TanhNetwork, ReluNetwork
from .utils import get_training_data, get_testing_data, set_random_seed
from .visualizations import show_image, plot_accuracy_history

EXIT_INDEX = -1


def parse_args(argv=None):
    defaults = TrainingConfig()
    parser = argparse.ArgumentParser(
        description="Train neural networks on MNIST with different activation functions "
                    "and the same parameters for comparison.",
    )
    parser.add_argument("--train-file", default=defaults.train_file, help="Training CSV file.")
    parser.add_argument("--test-file", default=defaults.test_file, help="Test CSV file.")
    parser.add_argument("--quantity", type=int, default=defaults.quantity,
                        help="Number of training images to use.")
    parser.add_argument("--epochs", type=int, default=defaults.epochs, help="Number of training epochs.")
    parser.add_argument("--lr", type=float, default=defaults.learning_rate, help="Learning rate.")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Random seed.")
    parser.add_argument("--image", default=defaults.image_path, help="Where to save the selected test image.")
    parser.add_argument("--plot", default=defaults.plot_path, help="Save an accuracy comparison plot here.")
    parser.add_argument("--quiet", action="store_true", help="Hide progress bars.")
    return parser.parse_args(argv)


def config_from_args(args):
    return TrainingConfig(
        train_file=args.train_file,
        test_file=args.test_file,
        quantity=args.quantity,
        epochs=args.epochs,
        learning_rate=args.lr,
        seed=args.seed,
        image_path=args.image,
        plot_path=args.plot,
        verbose=not args.quiet,
    )


def train_networks(X, Y, config):
    """
    Train one network per activation function on the same data.

    Returns:
        (networks, histories), both dictionaries keyed by display name
    """
    networks = {}
    histories = {}

    for number, (name, network_cls) in enumerate(
            [("Sigmoid", SigmoidNetwork), ("Tanh", TanhNetwork), ("ReLU", ReluNetwork)], start=1):
        print(f"Training Neural Network {number} using {name}...")
        network = network_cls()
        histories[name] = network.gradient_descent(X, Y, config.epochs, config.learning_rate,
                                                   verbose=config.verbose)
        networks[name] = network
        print(f"{name} Network training complete.\n")

    return networks, histories


def parse_index(text, max_index):
    """
    Parse a test-set index typed by the user.

    Returns:
        The index, EXIT_INDEX, or None if the input is not a valid choice
    """
    try:
        idx = int(text.strip())
    except ValueError:
        return None

    if idx == EXIT_INDEX or 0 <= idx <= max_index:
        return idx
    return None


def query_loop(networks, X_test, y_test, image_path="selected_img.png", input_fn=input):
    """
    Ask for test images until the user enters -1 and report each network's guess.

    Args:
        networks: Dictionary mapping display name to trained network
        X_test: Test images, shape (N, 784)
        y_test: Test labels, shape (N,)
        image_path: Where to save the selected image
        input_fn: Source of user input lines
    """
    max_index = len(X_test) - 1

    while True:
        print(f"\nEnter 0 to {max_index} to test an image from test set (or -1 to exit):")
        try:
            text = input_fn()
        except EOFError:
            text = str(EXIT_INDEX)

        idx = parse_index(text, max_index)
        if idx is None:
            print("Invalid input try again.")
            continue

        if idx == EXIT_INDEX:
            print("Exiting...")
            break

        print(f"Testing image #{idx} in test set:")
        image = X_test[idx]
        show_image(image, save_path=image_path)

        for name, network in networks.items():
            print(f"The {name} Network guessed that this is a: {network.make_guess(image)}")
        print(f"The digit is actually a: {int(y_test[idx])}")


def main(argv=None):
    config = config_from_args(parse_args(argv))

    print("This program will train Neural Networks on the MNIST Data Set using different "
          "activation functions with the same parameters for comparison.")

    if config.seed is not None:
        set_random_seed(config.seed)

    print(f"Loading in training data from file ({config.quantity} images).")
    try:
        X_train, Y_train = get_training_data(config.train_file, config.quantity)
    except (OSError, ValueError) as e:
        print(f"Could not load training data: {e}", file=sys.stderr)
        return 1

    print(f"Training data and parameters set. ({config.epochs} epochs, "
          f"{config.learning_rate} learn rate).\n")

    networks, histories = train_networks(X_train, Y_train, config)

    if config.plot_path:
        plot_accuracy_history(histories, save_path=config.plot_path)

    print("Acquiring testing data from file.")
    try:
        X_test, y_test = get_testing_data(config.test_file)
    except (OSError, ValueError) as e:
        print(f"Could not load testing data: {e}", file=sys.stderr)
        return 1

    query_loop(networks, X_test, y_test, image_path=config.image_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
