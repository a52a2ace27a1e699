"""
Batch gradient descent for the playground models.

Runs a fixed number of epochs with no early stopping. After every update the
new parameter value and the MSE at that value are recorded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from config import DataPoint, EpochRecord, ModelType, TrainingConfig, TrainingResult
from linear_model import LinearModel, get_model
from loss import mse_tensors, to_tensors


@dataclass
class GradientDescentTrainer:
    """
    Fits one model family to a dataset.

    The parameter starts at 0 on every call to train(), so a trainer can be
    reused across datasets.
    """

    model: LinearModel
    config: TrainingConfig

    def train(
        self,
        points: Sequence[DataPoint],
        *,
        progress_callback: Optional[Callable[[int, int, float], None]] = None,
    ) -> TrainingResult:
        """
        Run exactly config.epochs updates over the full dataset.

        Args:
            points: Non-empty dataset
            progress_callback: Called as (epoch, total_epochs, mse) after each epoch

        Returns:
            TrainingResult with final params and one EpochRecord per epoch
        """
        xs, ys = to_tensors(points)
        lr = self.config.learning_rate
        total = self.config.epochs

        value = 0.0
        trajectory = []
        for epoch in range(1, total + 1):
            value = self.model.step(xs, ys, value, lr)
            # Loss is measured at the updated value
            loss = mse_tensors(xs, ys, lambda x, v=value: self.model.predict(x, v))
            trajectory.append(EpochRecord(epoch=epoch, value=value, mse=loss))
            if progress_callback is not None:
                progress_callback(epoch, total, loss)

        return TrainingResult(
            model_type=self.model.model_type,
            params=self.model.params(value),
            trajectory=trajectory,
        )


def train_model(
    model_type: ModelType,
    points: Sequence[DataPoint],
    learning_rate: float,
    epochs: int,
    progress_callback: Optional[Callable[[int, int, float], None]] = None,
) -> TrainingResult:
    """Convenience wrapper: build a trainer for `model_type` and run it."""
    trainer = GradientDescentTrainer(
        model=get_model(model_type),
        config=TrainingConfig(learning_rate=learning_rate, epochs=epochs),
    )
    return trainer.train(points, progress_callback=progress_callback)
