"""Console entry point for TaxiFare AI."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_CONFIG, DataPaths, PipelineConfig
from .pipeline import TaxiFarePipeline


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the pipeline."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="TaxiFare AI - train a gradient-boosted fare model and evaluate it on held-out trips"
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding the train/test CSV files")
    parser.add_argument("--train", type=Path, default=None, help="Training CSV (overrides --data-dir)")
    parser.add_argument("--test", type=Path, default=None, help="Test CSV (overrides --data-dir)")
    parser.add_argument("--model-path", type=Path, default=None, help="Where --save-model writes the model")
    parser.add_argument("--save-model", action="store_true", help="Persist the trained model with joblib")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (stderr)",
    )
    return parser


def config_from_args(args: argparse.Namespace, base: PipelineConfig = DEFAULT_CONFIG) -> PipelineConfig:
    paths = base.paths
    if args.data_dir is not None:
        paths = DataPaths.under(args.data_dir)
    if args.train is not None:
        paths = replace(paths, train_csv=args.train)
    if args.test is not None:
        paths = replace(paths, test_csv=args.test)
    if args.model_path is not None:
        paths = replace(paths, model_path=args.model_path)
    return replace(base, paths=paths, save_model=args.save_model or base.save_model)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    pipeline = TaxiFarePipeline(config_from_args(args))
    result = pipeline.run()

    if result.model_path is not None:
        print(f"Model artifact stored at: {result.model_path}")


if __name__ == "__main__":
    main()
