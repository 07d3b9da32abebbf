"""Feature pipeline that turns trip rows into the regressor's feature vector."""
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import GradientBoostingRegressor
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder

from .config import FeatureConfig, ModelConfig

logger = logging.getLogger(__name__)

FEATURES_STEP = "features"
REGRESSOR_STEP = "regressor"


def copy_label(df: pd.DataFrame, feature_config: FeatureConfig) -> pd.DataFrame:
    """Return a copy of ``df`` with the fare duplicated into the label column."""
    labelled = df.copy()
    labelled[feature_config.label_column] = labelled[feature_config.source_label_column]
    return labelled


def build_feature_encoder(feature_config: FeatureConfig) -> ColumnTransformer:
    """One-hot encode the categorical columns and concatenate them with the numeric ones.

    The output column blocks follow ``feature_config.feature_order``. Categories are
    learned at fit time; a value unseen during fitting encodes as all zeros.
    """
    encoded_inputs = {output: source for source, output in feature_config.categorical_columns}
    transformers = []
    for name in feature_config.feature_order:
        if name in encoded_inputs:
            encoder = OneHotEncoder(handle_unknown="ignore", sparse_output=False, dtype=np.float64)
            transformers.append((name, encoder, [encoded_inputs[name]]))
        elif name in feature_config.numeric_columns:
            transformers.append((name, "passthrough", [name]))
        else:
            raise ValueError(f"Feature {name!r} is neither an encoded nor a numeric column")
    return ColumnTransformer(transformers=transformers, remainder="drop")


def build_regressor(model_config: ModelConfig) -> GradientBoostingRegressor:
    return GradientBoostingRegressor(
        n_estimators=model_config.n_estimators,
        learning_rate=model_config.learning_rate,
        max_leaf_nodes=model_config.max_leaf_nodes,
        max_depth=model_config.max_depth,
        min_samples_leaf=model_config.min_samples_leaf,
        random_state=model_config.random_state,
    )


def build_fare_pipeline(feature_config: FeatureConfig, model_config: ModelConfig) -> Pipeline:
    """Unfitted encoder + regressor pipeline; fit it on label-copied trip rows."""
    return Pipeline(
        steps=[
            (FEATURES_STEP, build_feature_encoder(feature_config)),
            (REGRESSOR_STEP, build_regressor(model_config)),
        ]
    )


def encoded_feature_names(pipeline: Pipeline) -> list[str]:
    """Names of the concatenated feature vector, in order."""
    return [str(name) for name in pipeline.named_steps[FEATURES_STEP].get_feature_names_out()]


def _fitted_encoder(pipeline: Pipeline, feature_config: FeatureConfig, column: str) -> OneHotEncoder:
    outputs = dict(feature_config.categorical_columns)
    if column not in outputs:
        raise KeyError(f"{column!r} is not a categorical column")
    return pipeline.named_steps[FEATURES_STEP].named_transformers_[outputs[column]]


def encoded_categories(pipeline: Pipeline, feature_config: FeatureConfig) -> dict[str, list[str]]:
    """Categories each encoder learned from the training data."""
    categories = {}
    for source, _ in feature_config.categorical_columns:
        encoder = _fitted_encoder(pipeline, feature_config, source)
        categories[source] = [str(value) for value in encoder.categories_[0]]
        logger.debug("%s: %d categories", source, len(categories[source]))
    return categories


def encode_categories(
    pipeline: Pipeline, feature_config: FeatureConfig, column: str, values: Iterable[str]
) -> np.ndarray:
    """One-hot vectors for ``values`` using the fitted encoder of ``column``."""
    encoder = _fitted_encoder(pipeline, feature_config, column)
    frame = pd.DataFrame({column: pd.Series(list(values), dtype=object)})
    return np.asarray(encoder.transform(frame))


def decode_categories(
    pipeline: Pipeline, feature_config: FeatureConfig, column: str, encoded: np.ndarray
) -> list[str | None]:
    """Invert :func:`encode_categories`; all-zero rows decode to ``None``."""
    encoder = _fitted_encoder(pipeline, feature_config, column)
    decoded = encoder.inverse_transform(np.asarray(encoded))
    return [None if value is None else str(value) for value in decoded[:, 0]]
