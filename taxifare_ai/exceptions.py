"""Error types raised by the TaxiFare AI pipeline stages."""
from __future__ import annotations


class TaxiFareError(Exception):
    """Base class for every pipeline failure."""


class DataIOError(TaxiFareError, OSError):
    """A data or model file is missing or unreadable."""


class ParseError(TaxiFareError, ValueError):
    """A CSV file does not match the trip schema."""


class TrainingError(TaxiFareError, RuntimeError):
    """The training dataset is empty or lacks a required column."""


class EvaluationError(TaxiFareError, RuntimeError):
    """The test dataset cannot be evaluated."""


class PredictionError(TaxiFareError, ValueError):
    """A single trip could not be scored."""
