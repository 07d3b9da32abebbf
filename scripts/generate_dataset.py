"""Generate synthetic train/test taxi trip CSVs for TaxiFare AI."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

HEADER = [
    "vendor_id",
    "rate_code",
    "passenger_count",
    "trip_time_in_secs",
    "trip_distance",
    "payment_type",
    "fare_amount",
]


@dataclass
class DatasetConfig:
    train_samples: int = 5000
    test_samples: int = 1000
    seed: int = 42
    out_dir: Path = Path("Data")


def simulate_row(rng: np.random.Generator) -> dict:
    vendor_id = rng.choice(["VTS", "CMT"])
    rate_code = rng.choice(["1", "1", "1", "1", "2", "5"])
    payment_type = rng.choice(["CRD", "CSH"], p=[0.6, 0.4])
    passenger_count = int(rng.choice([1, 1, 1, 2, 3, 5]))
    trip_distance = float(np.clip(rng.gamma(2.0, 1.6), 0.1, 30.0))
    trip_time = int(np.clip(trip_distance * rng.normal(300, 40), 60, 7200))

    fare = 2.0 + 3.6 * trip_distance
    if rate_code == "2":
        fare = 52.0
    elif rate_code == "5":
        fare *= 1.5
    fare += rng.normal(0, 0.6)

    return {
        "vendor_id": vendor_id,
        "rate_code": rate_code,
        "passenger_count": passenger_count,
        "trip_time_in_secs": trip_time,
        "trip_distance": round(trip_distance, 2),
        "payment_type": payment_type,
        "fare_amount": round(max(fare, 2.5), 1),
    }


def write_split(rng: np.random.Generator, samples: int, outfile: Path) -> None:
    df = pd.DataFrame([simulate_row(rng) for _ in range(samples)], columns=HEADER)
    outfile.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(outfile, index=False)
    print(f"Dataset written to {outfile} with {len(df)} rows")


def main(config: DatasetConfig) -> None:
    rng = np.random.default_rng(config.seed)
    write_split(rng, config.train_samples, config.out_dir / "taxi-fare-train.csv")
    write_split(rng, config.test_samples, config.out_dir / "taxi-fare-test.csv")


if __name__ == "__main__":
    main(DatasetConfig())
