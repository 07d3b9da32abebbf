"""Dataclasses used across the TaxiFare AI project."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

# CSV header, in file order.
TRIP_COLUMNS: tuple[str, ...] = (
    "vendorId",
    "rateCode",
    "passengerCount",
    "tripTime",
    "tripDistance",
    "paymentType",
    "fareAmount",
)

TRIP_DTYPES: dict[str, str] = {
    "vendorId": "object",
    "rateCode": "object",
    "passengerCount": "int64",
    "tripTime": "int64",
    "tripDistance": "float64",
    "paymentType": "object",
    "fareAmount": "float64",
}


@dataclass(frozen=True)
class TripRecord:
    """One historical taxi trip as read from the CSV."""

    vendor_id: str
    rate_code: str
    passenger_count: int
    trip_time: int
    trip_distance: float
    payment_type: str
    fare_amount: float = 0.0

    def to_row(self) -> dict[str, Any]:
        return {
            "vendorId": self.vendor_id,
            "rateCode": self.rate_code,
            "passengerCount": self.passenger_count,
            "tripTime": self.trip_time,
            "tripDistance": self.trip_distance,
            "paymentType": self.payment_type,
            "fareAmount": self.fare_amount,
        }


@dataclass(frozen=True)
class ModelMetrics:
    """Regression quality over a whole test set."""

    r2: float
    rmse: float
    mae: float
    mse: float
    row_count: int


@dataclass(frozen=True)
class FarePrediction:
    """Predicted fare for one trip next to the fare it is compared with."""

    fare_amount: float
    reference_fare: float


@dataclass(frozen=True)
class PipelineResult:
    """Snapshot of the complete pipeline execution."""

    metrics: ModelMetrics
    prediction: FarePrediction
    train_rows: int
    test_rows: int
    model_path: Path | None = None
