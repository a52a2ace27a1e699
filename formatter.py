"""Render a training trajectory for display and export"""
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List

from config import EpochRecord, ModelType, TrainingResult
from linear_model import get_model


def fixed(value: float, places: int) -> str:
    """
    Fixed-point text with exact binary ties rounded away from zero.

    Non-finite values are spelled NaN, Infinity and -Infinity.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0  # no "-0.0000"
    quantum = Decimal(1).scaleb(-places)
    # doubles reach ~309 integer digits
    exact = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=Context(prec=400))
    return format(exact, "f")


def render_table(trajectory: List[EpochRecord], model_type: ModelType) -> str:
    """HTML table of epoch, parameter and MSE, values to 4 decimals."""
    label = get_model(model_type).label
    rows = [
        '<table border="1" cellpadding="6">',
        f"<tr><th>Epoch</th><th>{label}</th><th>MSE</th></tr>",
    ]
    for record in trajectory:
        rows.append(
            f"<tr><td>{record.epoch}</td>"
            f"<td>{fixed(record.value, 4)}</td>"
            f"<td>{fixed(record.mse, 4)}</td></tr>"
        )
    rows.append("</table>")
    return "".join(rows)


def render_text(trajectory: List[EpochRecord], model_type: ModelType) -> str:
    """Comma-separated export: header plus one line per epoch, 6 decimals."""
    label = get_model(model_type).label
    lines = [f"Epoch,{label},MSE"]
    for record in trajectory:
        lines.append(f"{record.epoch},{fixed(record.value, 6)},{fixed(record.mse, 6)}")
    return "\n".join(lines)


def render_summary(result: TrainingResult) -> str:
    """Format the final parameter and loss as markdown."""
    final_mse = result.trajectory[-1].mse if result.trajectory else float("nan")
    return "\n".join(
        [
            "### Result",
            f"- **model**: `{ModelType(result.model_type).value}`",
            f"- **epochs**: `{len(result.trajectory)}`",
            f"- **{result.params.label}**: `{fixed(result.params.value, 6)}`",
            f"- **final_mse**: `{fixed(final_mse, 6)}`",
        ]
    )
