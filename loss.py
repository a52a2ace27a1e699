"""
Loss evaluation for the playground models.

Mean squared error over a dataset, computed on float64 tensors.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple, Union

import torch

from config import DataPoint

Prediction = Union[torch.Tensor, float]


class EmptyDatasetError(ValueError):
    """Raised when a loss or training step is given no data points"""
    pass


def to_tensors(points: Sequence[DataPoint]) -> Tuple[torch.Tensor, torch.Tensor]:
    """Split points into float64 x and y tensors, preserving order."""
    if len(points) == 0:
        raise EmptyDatasetError("CSV data is invalid or empty.")
    xs = torch.tensor([p.x for p in points], dtype=torch.float64)
    ys = torch.tensor([p.y for p in points], dtype=torch.float64)
    return xs, ys


def mse_tensors(
    xs: torch.Tensor,
    ys: torch.Tensor,
    predict: Callable[[torch.Tensor], Prediction],
) -> float:
    """MSE of `predict` against tensors already built by to_tensors()."""
    if xs.numel() == 0:
        raise EmptyDatasetError("CSV data is invalid or empty.")
    errors = ys - predict(xs)
    return float(torch.sum(errors * errors) / xs.numel())


def mse(points: Sequence[DataPoint], predict: Callable[[torch.Tensor], Prediction]) -> float:
    """
    Mean squared error: sum((y_i - predict(x_i))^2) / n.

    `predict` receives the tensor of x values and may return a tensor or a
    scalar. Raises EmptyDatasetError for an empty dataset.
    """
    xs, ys = to_tensors(points)
    return mse_tensors(xs, ys, predict)
