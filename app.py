"""
Gradient Descent Playground - Gradio UI

Paste (x, y) data → pick y=b or y=a*x → watch the parameter move epoch by epoch.
"""
import os
import inspect
from typing import Any, Dict, Tuple

import gradio as gr

from config import SAMPLE_CSV, ModelType, TrainingConfig
from formatter import render_summary
from loss import EmptyDatasetError
from pipeline import InvalidInputError, run_playground


def _compatible_kwargs(fn, requested: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the kwargs the installed Gradio version accepts."""
    allowed = set(inspect.signature(fn).parameters.keys())
    return {k: v for k, v in requested.items() if k in allowed}


def _safe_err(msg: str) -> Tuple[str, str, str]:
    return "", f'<span style="color:red">{msg}</span>', ""


def run_training(
    model_type: str,
    learning_rate: float,
    epochs: float,
    csv_text: str,
) -> Tuple[str, str, str]:
    """
    Train on the pasted data.

    Returns:
        summary_md, table_html, sequence_text
    """
    try:
        output = run_playground(model_type, learning_rate, epochs, csv_text)
    except (InvalidInputError, EmptyDatasetError) as e:
        return _safe_err(str(e))

    return render_summary(output.result), output.table_html, output.text


def load_sample() -> str:
    return SAMPLE_CSV


def build_ui() -> gr.Blocks:
    """Build the Gradio UI."""
    defaults = TrainingConfig()

    with gr.Blocks(title="Gradient Descent Playground") as demo:
        gr.Markdown("# Gradient Descent Playground")
        gr.Markdown("Fit `y=b` or `y=a*x` to your data with batch gradient descent.")

        with gr.Row():
            model_type = gr.Dropdown(
                label="Model",
                choices=[m.value for m in ModelType],
                value=ModelType.INTERCEPT.value,
            )
            learning_rate = gr.Number(label="Learning rate", value=defaults.learning_rate)
            epochs = gr.Number(label="Epochs", value=defaults.epochs, precision=0)

        csv_data = gr.Textbox(
            label="CSV data (x,y per line)",
            lines=8,
            value=SAMPLE_CSV,
        )

        with gr.Row():
            run_btn = gr.Button("Run", variant="primary")
            sample_btn = gr.Button("Load sample", variant="secondary")

        summary_md = gr.Markdown("")
        output = gr.HTML("")

        gr.Markdown("---\n## Parameter sequence")
        param_sequence = gr.Textbox(
            label="Epoch, parameter, MSE",
            lines=10,
            interactive=False,
            **_compatible_kwargs(
                gr.Textbox.__init__,
                {"show_copy_button": True, "buttons": ["copy"]},
            ),
        )

        run_btn.click(
            fn=run_training,
            inputs=[model_type, learning_rate, epochs, csv_data],
            outputs=[summary_md, output, param_sequence],
        )

        sample_btn.click(fn=load_sample, inputs=[], outputs=[csv_data])

    return demo


if __name__ == "__main__":
    demo = build_ui()

    # Filter launch kwargs by signature (Gradio version compatibility)
    requested = {
        "server_name": os.getenv("GRADIO_SERVER_NAME", "0.0.0.0"),
        "server_port": int(os.getenv("PORT", "7860")),
        "show_api": False,
    }
    demo.launch(**_compatible_kwargs(demo.launch, requested))
