from __future__ import annotations

import pytest

from taxifare_ai.data_models import FarePrediction, ModelMetrics
from taxifare_ai.reporting import ReportGenerator, format_decimal


@pytest.mark.parametrize(
    ("value", "decimals", "leading_zero", "expected"),
    [
        (0.9234, 2, True, "0.92"),
        (0.9, 2, True, "0.9"),
        (1.0, 2, True, "1"),
        (-0.456, 2, True, "-0.46"),
        (2.4567, 2, False, "2.46"),
        (0.456, 2, False, ".46"),
        (0.001, 2, False, ""),
        (15.32114, 4, True, "15.3211"),
        (-0.00001, 4, True, "0"),
    ],
)
def test_format_decimal(value: float, decimals: int, leading_zero: bool, expected: str) -> None:
    assert format_decimal(value, decimals, leading_zero) == expected


def test_metrics_block() -> None:
    lines = ReportGenerator.metrics_lines(ModelMetrics(r2=0.9187, rmse=2.4512, mae=1.2, mse=6.0, row_count=10))
    assert lines[0] == ""
    assert "*       Rsquared Score:     0.92" in lines
    assert "*       Root Mean Squared Error:    2.45" in lines


def test_prediction_block_is_echoed() -> None:
    captured: list[str] = []
    ReportGenerator(captured.append).report_prediction(FarePrediction(fare_amount=15.32114, reference_fare=15.5))
    assert captured == [
        "*********************************",
        "Predicted Fare: 15.3211, actual fare: 15.5",
        "*********************************",
    ]
