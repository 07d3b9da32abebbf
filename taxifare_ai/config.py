"""Configuration objects for the TaxiFare AI training pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DataPaths:
    """Input and output locations, relative to the working directory."""

    train_csv: Path = Path("Data/taxi-fare-train.csv")
    test_csv: Path = Path("Data/taxi-fare-test.csv")
    model_path: Path = Path("Data/Model.zip")

    @classmethod
    def under(cls, data_dir: Path) -> "DataPaths":
        """Default file names rooted at another data directory."""
        return cls(
            train_csv=data_dir / "taxi-fare-train.csv",
            test_csv=data_dir / "taxi-fare-test.csv",
            model_path=data_dir / "Model.zip",
        )


@dataclass(frozen=True)
class FeatureConfig:
    """Column names consumed and produced by the feature pipeline."""

    source_label_column: str = "fareAmount"
    label_column: str = "label"
    score_column: str = "score"
    features_column: str = "features"
    # input column -> encoded output column
    categorical_columns: tuple[tuple[str, str], ...] = (
        ("vendorId", "vendorIdEncoded"),
        ("rateCode", "rateCodeEncoded"),
        ("paymentType", "paymentTypeEncoded"),
    )
    numeric_columns: tuple[str, ...] = ("passengerCount", "tripDistance")
    # Order of the concatenated feature vector.
    feature_order: tuple[str, ...] = (
        "vendorIdEncoded",
        "rateCodeEncoded",
        "passengerCount",
        "tripDistance",
        "paymentTypeEncoded",
    )

    @property
    def required_columns(self) -> tuple[str, ...]:
        return tuple(src for src, _ in self.categorical_columns) + self.numeric_columns + (
            self.source_label_column,
        )


@dataclass(frozen=True)
class ModelConfig:
    """Gradient-boosted tree settings, mirroring the FastTree regressor defaults."""

    random_state: int = 0
    n_estimators: int = 100
    learning_rate: float = 0.2
    max_leaf_nodes: int = 20
    max_depth: int | None = None
    min_samples_leaf: int = 10


@dataclass(frozen=True)
class SampleTripConfig:
    """The single demonstration trip and its observed fare."""

    vendor_id: str = "VTS"
    rate_code: str = "1"
    passenger_count: int = 1
    trip_time: int = 1140
    trip_distance: float = 3.75
    payment_type: str = "CRD"
    reference_fare: float = 15.5


@dataclass(frozen=True)
class PipelineConfig:
    """Root configuration object that bundles all other configs."""

    paths: DataPaths = field(default_factory=DataPaths)
    features: FeatureConfig = field(default_factory=FeatureConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    sample_trip: SampleTripConfig = field(default_factory=SampleTripConfig)
    save_model: bool = False


DEFAULT_CONFIG = PipelineConfig()
