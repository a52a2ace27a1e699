"""Tests for loss.py"""
import pytest
import torch
from config import DataPoint
from loss import EmptyDatasetError, mse, mse_tensors, to_tensors


class TestMSE:
    """Test mean squared error"""

    def test_constant_prediction(self):
        """Test (4 + 16) / 2 = 10 for a zero predictor"""
        data = [DataPoint(0, 2), DataPoint(0, 4)]
        assert mse(data, lambda x: 0) == pytest.approx(10.0)

    def test_perfect_fit(self):
        """Test zero loss for an exact predictor"""
        data = [DataPoint(1, 3), DataPoint(2, 6), DataPoint(-1, -3)]
        assert mse(data, lambda x: 3 * x) == 0.0

    def test_tensor_prediction(self):
        """Test predictors returning a tensor per point"""
        data = [DataPoint(1, 1), DataPoint(2, 1)]
        # errors: 0 and -1
        assert mse(data, lambda x: x) == pytest.approx(0.5)

    def test_returns_python_float(self):
        assert isinstance(mse([DataPoint(0, 1)], lambda x: 0), float)

    def test_empty_dataset_raises(self):
        """Test empty dataset is rejected instead of returning NaN"""
        with pytest.raises(EmptyDatasetError):
            mse([], lambda x: 0)

    def test_empty_tensors_raise(self):
        empty = torch.tensor([], dtype=torch.float64)
        with pytest.raises(EmptyDatasetError):
            mse_tensors(empty, empty, lambda x: 0)


class TestToTensors:
    """Test to_tensors()"""

    def test_float64_and_order(self):
        xs, ys = to_tensors([DataPoint(1, 2), DataPoint(3, 4)])
        assert xs.dtype == torch.float64
        assert xs.tolist() == [1.0, 3.0]
        assert ys.tolist() == [2.0, 4.0]
