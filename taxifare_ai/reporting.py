"""Console reporting for TaxiFare AI runs."""
from __future__ import annotations

from typing import Callable

from .data_models import FarePrediction, ModelMetrics

Echo = Callable[[str], None]


def format_decimal(value: float, max_decimals: int, leading_zero: bool = True) -> str:
    """Round to at most ``max_decimals`` places and drop trailing zeros.

    ``format_decimal(0.456, 2)`` gives ``"0.46"``; with ``leading_zero=False`` it
    gives ``".46"``, and a value rounding to zero gives an empty string.
    """
    text = f"{value:.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if float(text) == 0:
        text = "0"
    if not leading_zero:
        if text == "0":
            return ""
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    return text


class ReportGenerator:
    """Prints the metrics and single-prediction blocks of a run."""

    def __init__(self, echo: Echo = print) -> None:
        self.echo = echo

    @staticmethod
    def metrics_lines(metrics: ModelMetrics) -> list[str]:
        return [
            "",
            "************************",
            "*       Model Quality metrics evaluation        ",
            "*--------------------------",
            # closer to 1 is better
            f"*       Rsquared Score:     {format_decimal(metrics.r2, 2)}",
            # lower is better
            f"*       Root Mean Squared Error:    {format_decimal(metrics.rmse, 2, leading_zero=False)}",
        ]

    @staticmethod
    def prediction_lines(prediction: FarePrediction) -> list[str]:
        return [
            "*********************************",
            f"Predicted Fare: {format_decimal(prediction.fare_amount, 4)}, "
            f"actual fare: {format_decimal(prediction.reference_fare, 4)}",
            "*********************************",
        ]

    def report_metrics(self, metrics: ModelMetrics) -> None:
        self._emit(self.metrics_lines(metrics))

    def report_prediction(self, prediction: FarePrediction) -> None:
        self._emit(self.prediction_lines(prediction))

    def _emit(self, lines: list[str]) -> None:
        for line in lines:
            self.echo(line)
