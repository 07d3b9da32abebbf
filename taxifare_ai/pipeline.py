"""Top-level orchestration for the TaxiFare AI train / evaluate / predict workflow."""
from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_CONFIG, PipelineConfig
from .data_loader import TripDataLoader
from .data_models import FarePrediction, PipelineResult, TripRecord
from .modeling import FareRegressor
from .reporting import Echo, ReportGenerator

logger = logging.getLogger(__name__)


class TaxiFarePipeline:
    """Trains the fare model, scores the test set and runs one sample prediction."""

    def __init__(self, config: PipelineConfig | None = None, echo: Echo = print) -> None:
        self.config = config or DEFAULT_CONFIG
        self.echo = echo
        self.loader = TripDataLoader()
        self.model = FareRegressor(self.config.features, self.config.model)
        self.reporter = ReportGenerator(echo)

    def sample_trip(self) -> TripRecord:
        sample = self.config.sample_trip
        return TripRecord(
            vendor_id=sample.vendor_id,
            rate_code=sample.rate_code,
            passenger_count=sample.passenger_count,
            trip_time=sample.trip_time,
            trip_distance=sample.trip_distance,
            payment_type=sample.payment_type,
            fare_amount=0.0,  # to predict
        )

    def run(self) -> PipelineResult:
        self.echo(str(Path.cwd()))

        train_df = self.loader.load(self.config.paths.train_csv)
        self.model.fit(train_df)

        test_df = self.loader.load(self.config.paths.test_csv)
        metrics = self.model.evaluate(test_df)
        self.reporter.report_metrics(metrics)

        fare = self.model.predict_one(self.sample_trip())
        prediction = FarePrediction(fare_amount=fare, reference_fare=self.config.sample_trip.reference_fare)
        self.reporter.report_prediction(prediction)

        model_path = None
        if self.config.save_model:
            model_path = self.model.save(self.config.paths.model_path)

        logger.info("Run finished: %d training trips, %d test trips", len(train_df), len(test_df))
        return PipelineResult(
            metrics=metrics,
            prediction=prediction,
            train_rows=len(train_df),
            test_rows=len(test_df),
            model_path=model_path,
        )
