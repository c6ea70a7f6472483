# config.py
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class TrainingConfig:
    # data
    train_file: str = "mnist_data/mnist_train.csv"
    test_file: str = "mnist_data/mnist_test.csv"
    quantity: int = 10000                # training images taken from the start of the file

    # shared training parameters for every network
    epochs: int = 3
    learning_rate: float = 0.01
    seed: Optional[int] = None

    # output
    image_path: str = "selected_img.png"
    plot_path: Optional[str] = None
    verbose: bool = True

    def with_(self, **kwargs) -> "TrainingConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
