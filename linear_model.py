"""
Single-parameter linear models: y = b and y = a * x.

Each family is its own variant carrying the analytic MSE gradient for its
parameter, so the trainer never branches on the model type.
"""

from typing import Dict

import torch

from config import InterceptParams, ModelParams, ModelType, SlopeParams


class LinearModel:
    """Base for a one-parameter model family."""

    model_type: ModelType
    label: str

    def predict(self, xs: torch.Tensor, value: float) -> torch.Tensor:
        raise NotImplementedError

    def gradient(self, xs: torch.Tensor, ys: torch.Tensor, value: float) -> float:
        """d(MSE)/d(param) over the whole batch."""
        raise NotImplementedError

    def params(self, value: float) -> ModelParams:
        raise NotImplementedError

    def step(self, xs: torch.Tensor, ys: torch.Tensor, value: float, learning_rate: float) -> float:
        """One batch gradient descent update, returns the new value."""
        return value - learning_rate * self.gradient(xs, ys, value)


class InterceptModel(LinearModel):
    """y = b"""

    model_type = ModelType.INTERCEPT
    label = "b"

    def predict(self, xs: torch.Tensor, value: float) -> torch.Tensor:
        return torch.full_like(xs, value)

    def gradient(self, xs: torch.Tensor, ys: torch.Tensor, value: float) -> float:
        return float(torch.sum(-2 * (ys - value)) / xs.numel())

    def params(self, value: float) -> ModelParams:
        return InterceptParams(b=value)


class SlopeModel(LinearModel):
    """y = a * x"""

    model_type = ModelType.SLOPE
    label = "a"

    def predict(self, xs: torch.Tensor, value: float) -> torch.Tensor:
        return value * xs

    def gradient(self, xs: torch.Tensor, ys: torch.Tensor, value: float) -> float:
        return float(torch.sum(-2 * xs * (ys - value * xs)) / xs.numel())

    def params(self, value: float) -> ModelParams:
        return SlopeParams(a=value)


MODELS: Dict[ModelType, LinearModel] = {
    ModelType.INTERCEPT: InterceptModel(),
    ModelType.SLOPE: SlopeModel(),
}


def get_model(model_type) -> LinearModel:
    """Look up the model family for a ModelType or its string tag."""
    try:
        return MODELS[ModelType(model_type)]
    except ValueError as e:
        raise ValueError(f"Unknown model type: {model_type!r}") from e
