from __future__ import annotations

import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import GradientBoostingRegressor

from taxifare_ai.config import FeatureConfig, ModelConfig
from taxifare_ai.feature_engineering import (
    build_fare_pipeline,
    copy_label,
    decode_categories,
    encode_categories,
    encoded_categories,
    encoded_feature_names,
)

FEATURES = FeatureConfig()
MODEL = ModelConfig()


def _fitted(df: pd.DataFrame):
    labelled = copy_label(df, FEATURES)
    pipeline = build_fare_pipeline(FEATURES, MODEL)
    return pipeline.fit(labelled, labelled[FEATURES.label_column])


def test_copy_label_duplicates_fare(make_trips) -> None:
    df = make_trips(n=20)
    labelled = copy_label(df, FEATURES)
    assert "label" not in df.columns
    assert labelled["label"].tolist() == df["fareAmount"].tolist()


def test_unfitted_pipeline_layout() -> None:
    pipeline = build_fare_pipeline(FEATURES, MODEL)
    encoder, regressor = (step for _, step in pipeline.steps)
    assert isinstance(encoder, ColumnTransformer)
    assert [name for name, _, _ in encoder.transformers] == list(FEATURES.feature_order)
    assert isinstance(regressor, GradientBoostingRegressor)
    assert regressor.random_state == 0
    assert regressor.max_leaf_nodes == 20


def test_feature_vector_follows_concatenation_order(make_trips) -> None:
    pipeline = _fitted(make_trips(n=120))
    names = encoded_feature_names(pipeline)

    blocks: list[str] = []
    for name in names:
        block = name.split("__", 1)[0]
        if not blocks or blocks[-1] != block:
            blocks.append(block)

    assert blocks == list(FEATURES.feature_order)
    assert "label" not in " ".join(names)
    assert "tripTime" not in " ".join(names)


def test_categories_learned_from_training_data(make_trips) -> None:
    pipeline = _fitted(make_trips(n=120))
    categories = encoded_categories(pipeline, FEATURES)
    assert categories == {
        "vendorId": ["CMT", "VTS"],
        "rateCode": ["1", "5"],
        "paymentType": ["CRD", "CSH"],
    }


def test_one_hot_round_trip(make_trips) -> None:
    pipeline = _fitted(make_trips(n=120))
    for column, values in encoded_categories(pipeline, FEATURES).items():
        encoded = encode_categories(pipeline, FEATURES, column, values)
        assert encoded.shape == (len(values), len(values))
        assert (encoded.sum(axis=1) == 1).all()
        assert decode_categories(pipeline, FEATURES, column, encoded) == values


def test_unseen_category_encodes_as_zero_vector(make_trips) -> None:
    pipeline = _fitted(make_trips(n=120))
    encoded = encode_categories(pipeline, FEATURES, "vendorId", ["DDS"])
    assert np.array_equal(encoded, np.zeros((1, 2)))
    assert decode_categories(pipeline, FEATURES, "vendorId", encoded) == [None]
