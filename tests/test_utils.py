"""
Tests for Utilities
===================

argmax, accuracy helpers, one-hot encoding and CSV data loading.
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from digitnet.utils import (argmax, if_correct, get_percentage, one_hot_encode,
                            read_csv, get_training_data, get_testing_data)


class TestArgmax:
    """Tests for argmax."""

    def test_first_max_wins(self):
        assert argmax(np.array([0.1, 0.9, 0.9])) == 1

    def test_simple(self):
        assert argmax(np.array([3.0, -1.0, 7.5, 2.0])) == 2
        assert argmax(np.array([5.0])) == 0

    def test_all_negative(self):
        assert argmax(np.array([-3.0, -1.0, -2.0])) == 1

    def test_all_equal(self):
        assert argmax(np.zeros(4)) == 0

    def test_column_vector(self):
        assert argmax(np.array([[0.2], [0.5], [0.3]])) == 1


class TestIfCorrect:
    """Tests for if_correct."""

    def test_match(self):
        output = np.array([[0.1], [0.7], [0.2]])
        label = np.array([[0.0], [1.0], [0.0]])
        assert if_correct(output, label)

    def test_mismatch(self):
        output = np.array([[0.6], [0.3], [0.1]])
        label = np.array([[0.0], [0.0], [1.0]])
        assert not if_correct(output, label)


class TestGetPercentage:
    """Tests for get_percentage."""

    def test_values(self):
        assert get_percentage(3, 10) == pytest.approx(30.0)
        assert get_percentage(0, 7) == 0.0
        assert get_percentage(4, 4) == pytest.approx(100.0)


class TestOneHotEncode:
    """Tests for one_hot_encode."""

    def test_small_example(self):
        out = one_hot_encode(np.array([0, 2, 1]))

        expected = np.array([[1, 0, 0], [0, 0, 1], [0, 1, 0]], dtype=np.float64)
        np.testing.assert_array_equal(out, expected)

    def test_width_from_max_label(self):
        out = one_hot_encode([9, 3])

        assert out.shape == (2, 10)
        np.testing.assert_array_equal(out.sum(axis=1), [1.0, 1.0])
        assert out[0, 9] == 1.0 and out[1, 3] == 1.0

    def test_float_labels(self):
        out = one_hot_encode(np.array([1.0, 0.0]))
        np.testing.assert_array_equal(out, [[0, 1], [1, 0]])


class TestReadCsv:
    """Tests for read_csv."""

    def test_reads_rows(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b,c\n1,2,3\n4,5,6\n")

        data = read_csv(path)

        np.testing.assert_array_equal(data, [[1, 2, 3], [4, 5, 6]])

    def test_without_header(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("1,2\n")

        data = read_csv(path, has_header=False)

        assert data.shape == (1, 2)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_csv(tmp_path / "missing.csv")

    def test_malformed_row(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b\n1,two\n")

        with pytest.raises(ValueError):
            read_csv(path)


class TestDatasetLoading:
    """Tests for get_training_data and get_testing_data."""

    def test_training_data(self, mnist_csv):
        path = mnist_csv([5, 0, 9, 1])

        X, Y = get_training_data(path)

        assert X.shape == (4, 784)
        assert Y.shape == (4, 10)
        assert X.min() >= 0.0 and X.max() <= 1.0
        np.testing.assert_array_equal(np.argmax(Y, axis=1), [5, 0, 9, 1])

    def test_training_subset(self, mnist_csv):
        path = mnist_csv([2, 1, 0, 3, 4])

        X, Y = get_training_data(path, size=3)

        assert X.shape == (3, 784)
        # One-hot width comes from the largest label loaded
        assert Y.shape == (3, 3)

    def test_pixels_scaled(self, tmp_path):
        path = tmp_path / "one.csv"
        header = ",".join(["label"] + [f"p{i}" for i in range(784)])
        row = ",".join(["7"] + ["255"] * 392 + ["0"] * 392)
        path.write_text(header + "\n" + row + "\n")

        X, y = get_testing_data(path)

        assert X[0, 0] == 1.0 and X[0, -1] == 0.0
        np.testing.assert_array_equal(y, [7])

    def test_testing_data_labels_raw(self, mnist_csv):
        path = mnist_csv([3, 8])

        X, y = get_testing_data(path)

        assert X.shape == (2, 784)
        assert y.ndim == 1
        np.testing.assert_array_equal(y, [3, 8])

    def test_wrong_column_count(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("label,p1,p2\n1,0,255\n")

        with pytest.raises(ValueError, match="785 columns"):
            get_training_data(path)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
