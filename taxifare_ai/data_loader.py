"""Data loading utilities for TaxiFare AI."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

from .data_models import TRIP_COLUMNS, TRIP_DTYPES, TripRecord
from .exceptions import DataIOError, ParseError

logger = logging.getLogger(__name__)

_INTEGER_COLUMNS = ("passengerCount", "tripTime")
_FLOAT_COLUMNS = ("tripDistance", "fareAmount")
_CATEGORICAL_COLUMNS = ("vendorId", "rateCode", "paymentType")


def _whole_numbers(values: pd.Series, col: str, source: str) -> pd.Series:
    """Coerce ``values`` to int64, rejecting non-numeric, non-finite and fractional entries."""
    try:
        numeric = pd.to_numeric(values, errors="raise").astype("float64")
    except (TypeError, ValueError) as exc:
        raise ParseError(f"{source}: non-numeric value in {col}: {exc}") from exc
    if not np.isfinite(numeric).all():
        raise ParseError(f"{source}: {col} holds a missing or infinite value")
    if (numeric != numeric.round()).any():
        raise ParseError(f"{source}: {col} must hold whole numbers")
    return numeric.astype("int64")


def empty_trip_frame() -> pd.DataFrame:
    """A dataset with the trip schema and no rows."""
    return pd.DataFrame({col: pd.Series(dtype=TRIP_DTYPES[col]) for col in TRIP_COLUMNS})


def records_to_frame(records: Iterable[TripRecord]) -> pd.DataFrame:
    """Build a typed dataset from in-memory trip records."""
    rows = [record.to_row() for record in records]
    if not rows:
        return empty_trip_frame()
    df = pd.DataFrame(rows, columns=list(TRIP_COLUMNS))
    for col in _INTEGER_COLUMNS:
        df[col] = _whole_numbers(df[col].astype(object), col, "trip record")
    try:
        return df.astype(TRIP_DTYPES)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Trip records do not match the trip schema: {exc}") from exc


class TripDataLoader:
    """Reads header-having delimited trip files into typed DataFrames.

    Columns are matched by position: the file must have exactly as many columns as
    the trip schema, and they are renamed to the schema names on load.
    """

    def __init__(self, separator: str = ",") -> None:
        self.separator = separator

    def load(self, path: Path | str) -> pd.DataFrame:
        path = Path(path)
        if not path.is_file():
            raise DataIOError(f"Trip data file not found: {path.resolve()}")

        try:
            raw = pd.read_csv(
                path,
                sep=self.separator,
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
            )
        except pd.errors.EmptyDataError:
            logger.warning("Trip data file %s is empty", path)
            return empty_trip_frame()
        except pd.errors.ParserError as exc:
            raise ParseError(f"Malformed trip data in {path.name}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DataIOError(f"Could not read trip data from {path}: {exc}") from exc

        self._check_header(raw.columns, path)
        if raw.empty:
            logger.warning("Trip data file %s has a header but no rows", path)
            return empty_trip_frame()
        raw.columns = list(TRIP_COLUMNS)
        df = self._coerce(raw, path)
        logger.info("Loaded %d trips from %s", len(df), path)
        return df

    @staticmethod
    def _check_header(columns: Iterable[str], path: Path) -> None:
        header = [str(col).strip() for col in columns]
        if len(header) != len(TRIP_COLUMNS):
            raise ParseError(
                f"{path.name} has {len(header)} columns, expected {len(TRIP_COLUMNS)}: {', '.join(TRIP_COLUMNS)}"
            )
        if tuple(header) != TRIP_COLUMNS:
            logger.debug("Mapping header %s of %s onto %s", header, path.name, list(TRIP_COLUMNS))

    @staticmethod
    def _coerce(raw: pd.DataFrame, path: Path) -> pd.DataFrame:
        df = raw.copy()
        for col in TRIP_COLUMNS:
            values = df[col].astype(object)
            missing = values.isna() | (values.astype(str).str.strip() == "")
            if missing.any():
                row = int(missing.to_numpy().nonzero()[0][0]) + 1
                raise ParseError(f"{path.name}, data row {row}: missing value for {col}")
            df[col] = values.astype(str).str.strip()

        for col in _CATEGORICAL_COLUMNS:
            df[col] = df[col].astype(object)

        for col in _INTEGER_COLUMNS:
            df[col] = _whole_numbers(df[col], col, path.name)

        for col in _FLOAT_COLUMNS:
            try:
                numeric = pd.to_numeric(df[col], errors="raise")
            except (TypeError, ValueError) as exc:
                raise ParseError(f"{path.name}: non-numeric value in {col}: {exc}") from exc
            df[col] = numeric.astype(TRIP_DTYPES[col])
        return df
