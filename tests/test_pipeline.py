"""Tests for the run_playground entry point"""
import pytest
from config import ModelType
from loss import EmptyDatasetError
from pipeline import (
    EMPTY_DATA_MESSAGE,
    INVALID_INPUT_MESSAGE,
    InvalidInputError,
    run_playground,
    validate_inputs,
)


class TestValidateInputs:
    """Test input coercion and rejection"""

    def test_coerces_strings(self):
        kind, lr, epochs, text = validate_inputs("y=a*x", "0.5", "3", "1,2")
        assert kind is ModelType.SLOPE
        assert lr == 0.5
        assert epochs == 3
        assert text == "1,2"

    def test_truncates_fractional_epochs(self):
        assert validate_inputs("y=b", 0.1, 2.7, "1,2")[2] == 2

    @pytest.mark.parametrize(
        "args",
        [
            ("y=b", 0.1, 5, ""),
            ("y=b", 0.1, 5, None),
            ("y=b", "abc", 5, "1,2"),
            ("y=b", float("nan"), 5, "1,2"),
            ("y=b", 0.1, "ten", "1,2"),
            ("y=b", 0.1, 0, "1,2"),
            ("y=b", 0.1, -3, "1,2"),
            ("y=b", 0.1, None, "1,2"),
            ("y=c", 0.1, 5, "1,2"),
        ],
    )
    def test_rejects_invalid(self, args):
        with pytest.raises(InvalidInputError, match=INVALID_INPUT_MESSAGE):
            validate_inputs(*args)


class TestRunPlayground:
    """Test the full parse → train → render flow"""

    def test_outputs(self):
        output = run_playground("y=b", 0.1, 2, "0,4\n0,4")
        assert len(output.result.trajectory) == 2
        assert output.text == "Epoch,b,MSE\n1,0.800000,10.240000\n2,1.440000,6.553600"
        assert output.table_html.startswith('<table border="1" cellpadding="6">')
        assert output.table_html.count("<tr>") == 3

    def test_malformed_rows_ignored(self):
        clean = run_playground("y=a*x", 0.01, 10, "1,2\n2,4")
        noisy = run_playground("y=a*x", 0.01, 10, "1,2\nheader,row\n2,4\n3")
        assert clean.text == noisy.text

    def test_empty_dataset(self):
        with pytest.raises(EmptyDatasetError, match=EMPTY_DATA_MESSAGE):
            run_playground("y=b", 0.1, 5, "x,y\nfoo,bar")

    def test_invalid_input_checked_before_parsing(self):
        with pytest.raises(InvalidInputError):
            run_playground("y=b", 0.1, 0, "not,csv")
