from __future__ import annotations

from pathlib import Path
import sys
from typing import Callable

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

import numpy as np
import pandas as pd
import pytest

from taxifare_ai.data_models import TRIP_COLUMNS, TripRecord

SAMPLE_TRIP = TripRecord(
    vendor_id="VTS",
    rate_code="1",
    passenger_count=1,
    trip_time=1140,
    trip_distance=3.75,
    payment_type="CRD",
    fare_amount=15.5,
)


def _fare(distance: float, rate_code: str) -> float:
    fare = 2.0 + 3.6 * distance
    return fare * 1.5 if rate_code == "5" else fare


@pytest.fixture
def make_trips() -> Callable[..., pd.DataFrame]:
    """Factory for synthetic trip frames whose fare follows distance exactly."""

    def factory(
        n: int = 300,
        seed: int = 7,
        vendors: tuple[str, ...] = ("VTS", "CMT"),
        sample_copies: int = 0,
    ) -> pd.DataFrame:
        rng = np.random.default_rng(seed)
        distances = rng.choice(np.arange(0.5, 8.25, 0.25), size=n)
        rate_codes = rng.choice(["1", "1", "1", "5"], size=n)
        rows = {
            "vendorId": rng.choice(list(vendors), size=n),
            "rateCode": rate_codes,
            "passengerCount": rng.choice([1, 2, 3], size=n).astype("int64"),
            "tripTime": (distances * 300).astype("int64"),
            "tripDistance": distances.astype("float64"),
            "paymentType": rng.choice(["CRD", "CSH"], size=n),
            "fareAmount": np.array([_fare(d, r) for d, r in zip(distances, rate_codes)], dtype="float64"),
        }
        df = pd.DataFrame(rows, columns=list(TRIP_COLUMNS))
        for col in ("vendorId", "rateCode", "paymentType"):
            df[col] = df[col].astype(object)
        if sample_copies:
            sample = pd.DataFrame([SAMPLE_TRIP.to_row()] * sample_copies, columns=list(TRIP_COLUMNS))
            df = pd.concat([df, sample.astype(df.dtypes.to_dict())], ignore_index=True)
        return df

    return factory


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[pd.DataFrame, str], Path]:
    """Write a trip frame to ``tmp_path`` with the published dataset header."""
    header = [
        "vendor_id",
        "rate_code",
        "passenger_count",
        "trip_time_in_secs",
        "trip_distance",
        "payment_type",
        "fare_amount",
    ]

    def writer(df: pd.DataFrame, name: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        out = df.copy()
        out.columns = header
        out.to_csv(path, index=False)
        return path

    return writer


@pytest.fixture
def sample_trip() -> TripRecord:
    return SAMPLE_TRIP
