"""Modeling utilities for TaxiFare AI."""
from __future__ import annotations

import logging
from pathlib import Path

import joblib
import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from sklearn.pipeline import Pipeline

from .config import FeatureConfig, ModelConfig
from .data_loader import records_to_frame
from .data_models import ModelMetrics, TripRecord
from .exceptions import DataIOError, EvaluationError, ParseError, PredictionError, TrainingError
from .feature_engineering import build_fare_pipeline, copy_label, encoded_categories

logger = logging.getLogger(__name__)


class FareRegressor:
    """Wrapper around a scikit-learn pipeline that predicts the fare of a taxi trip."""

    def __init__(self, feature_config: FeatureConfig, model_config: ModelConfig) -> None:
        self.feature_config = feature_config
        self.model_config = model_config
        self.pipeline: Pipeline | None = None

    @property
    def is_fitted(self) -> bool:
        return self.pipeline is not None

    def fit(self, df: pd.DataFrame) -> "FareRegressor":
        if df.empty:
            raise TrainingError("Cannot train on an empty dataset")
        missing = [col for col in self.feature_config.required_columns if col not in df.columns]
        if missing:
            raise TrainingError(f"Training data lacks required columns: {', '.join(missing)}")

        labelled = copy_label(df, self.feature_config)
        pipeline = build_fare_pipeline(self.feature_config, self.model_config)
        try:
            pipeline.fit(labelled, labelled[self.feature_config.label_column])
        except ValueError as exc:
            raise TrainingError(f"Training failed: {exc}") from exc

        self.pipeline = pipeline
        categories = encoded_categories(pipeline, self.feature_config)
        logger.info(
            "Trained fare model on %d trips (%s)",
            len(df),
            ", ".join(f"{col}: {len(values)} categories" for col, values in categories.items()),
        )
        return self

    def predict(self, df: pd.DataFrame) -> pd.Series:
        pipeline = self._require_pipeline()
        scores = pipeline.predict(df)
        return pd.Series(scores, index=df.index, name=self.feature_config.score_column)

    def score(self, df: pd.DataFrame) -> pd.DataFrame:
        """Label-copied rows with the prediction appended as the score column."""
        scored = copy_label(df, self.feature_config)
        scored[self.feature_config.score_column] = self.predict(df)
        return scored

    def evaluate(self, df: pd.DataFrame) -> ModelMetrics:
        if df.empty:
            raise EvaluationError("Cannot evaluate on an empty dataset")
        try:
            scored = self.score(df)
        except (KeyError, ValueError) as exc:
            raise EvaluationError(f"Could not score the test dataset: {exc}") from exc

        metrics = self._compute_metrics(
            scored[self.feature_config.label_column].to_numpy(),
            scored[self.feature_config.score_column].to_numpy(),
        )
        logger.info("Evaluated %d trips: R2=%.4f RMSE=%.4f", metrics.row_count, metrics.r2, metrics.rmse)
        return metrics

    def predict_one(self, record: TripRecord) -> float:
        self._require_pipeline()
        try:
            frame = records_to_frame([record])
            value = float(self.predict(frame).iloc[0])
        except (ParseError, KeyError, TypeError, ValueError) as exc:
            raise PredictionError(f"Could not score trip {record!r}: {exc}") from exc
        logger.debug("Predicted fare %.4f for %r", value, record)
        return value

    def save(self, path: Path) -> Path:
        pipeline = self._require_pipeline()
        path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(pipeline, path)
        logger.info("Model written to %s", path)
        return path

    @classmethod
    def load(cls, path: Path, feature_config: FeatureConfig, model_config: ModelConfig) -> "FareRegressor":
        if not path.is_file():
            raise DataIOError(f"Model file not found: {path.resolve()}")
        regressor = cls(feature_config, model_config)
        try:
            regressor.pipeline = joblib.load(path)
        except (OSError, EOFError, ValueError) as exc:
            raise DataIOError(f"Could not read model from {path}: {exc}") from exc
        return regressor

    def _require_pipeline(self) -> Pipeline:
        if self.pipeline is None:
            raise RuntimeError("Model has not been trained yet.")
        return self.pipeline

    @staticmethod
    def _compute_metrics(y_true: np.ndarray, y_pred: np.ndarray) -> ModelMetrics:
        mae = float(mean_absolute_error(y_true, y_pred))
        mse = float(mean_squared_error(y_true, y_pred))
        rmse = float(mse**0.5)
        if len(y_true) < 2:
            # r2_score is undefined for one sample; use its constant-label convention.
            r2 = 1.0 if mse == 0 else 0.0
        else:
            r2 = float(r2_score(y_true, y_pred))
        return ModelMetrics(r2=r2, rmse=rmse, mae=mae, mse=mse, row_count=len(y_true))
