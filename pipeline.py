"""
Single entry point for one playground run.

Takes the four primitive inputs (model type, learning rate, epochs, CSV
text) and returns the training result plus both rendered outputs. The web UI
and the CLI are thin wrappers around run_playground().
"""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple

from config import ModelType, PlaygroundOutput
from csv_parser import CSVParser
from formatter import render_table, render_text
from loss import EmptyDatasetError
from trainer import train_model

INVALID_INPUT_MESSAGE = "Please enter valid inputs for all fields."
EMPTY_DATA_MESSAGE = "CSV data is invalid or empty."


class InvalidInputError(ValueError):
    """Raised when a run is requested with missing or non-numeric inputs"""
    pass


def validate_inputs(
    model_type: Any,
    learning_rate: Any,
    epochs: Any,
    csv_text: Optional[str],
) -> Tuple[ModelType, float, int, str]:
    """
    Coerce raw UI/CLI values into typed inputs.

    Epoch counts are truncated toward zero, so 2.7 runs 2 epochs.

    Raises:
        InvalidInputError: missing CSV text, non-numeric learning rate,
            non-numeric or sub-1 epochs, or unknown model type
    """
    if not csv_text:
        raise InvalidInputError(INVALID_INPUT_MESSAGE)
    try:
        kind = ModelType(model_type)
        lr = float(learning_rate)
        n_epochs = float(epochs)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(INVALID_INPUT_MESSAGE) from e
    if math.isnan(lr) or not math.isfinite(n_epochs) or n_epochs < 1:
        raise InvalidInputError(INVALID_INPUT_MESSAGE)
    return kind, lr, int(n_epochs), csv_text


def run_playground(
    model_type: Any,
    learning_rate: Any,
    epochs: Any,
    csv_text: Optional[str],
    progress_callback=None,
) -> PlaygroundOutput:
    """
    Validate, parse, train and render.

    Raises:
        InvalidInputError: see validate_inputs()
        EmptyDatasetError: no CSV row survived parsing
    """
    kind, lr, n_epochs, text = validate_inputs(model_type, learning_rate, epochs, csv_text)

    points = CSVParser().parse(text)
    if not points:
        raise EmptyDatasetError(EMPTY_DATA_MESSAGE)

    result = train_model(kind, points, lr, n_epochs, progress_callback=progress_callback)
    return PlaygroundOutput(
        result=result,
        table_html=render_table(result.trajectory, kind),
        text=render_text(result.trajectory, kind),
    )
