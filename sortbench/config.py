"""
Configuration settings for the service sort benchmark.

Uses Pydantic Settings to load environment variables (or a `.env` file) for
dataset locations, output paths, the list of dataset sizes and logging.
CLI options override these per run.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_SIZES: List[int] = [
    100, 8100, 16100, 24100, 32100, 40100, 48100,
    56100, 64100, 72100, 80100, 88100, 96100,
]


class Settings(BaseSettings):
    # Inputs
    dataset_sizes: List[int] = Field(
        default_factory=lambda: list(DEFAULT_DATASET_SIZES), alias="DATASET_SIZES"
    )
    datasets_dir: Path = Field(Path("datasets"), alias="DATASETS_DIR")
    dataset_filename_pattern: str = Field(
        "it_services_dataset_diverse_{size}.csv", alias="DATASET_FILENAME_PATTERN"
    )

    # Outputs
    results_dir: Path = Field(Path("results"), alias="RESULTS_DIR")
    timing_results_filename: str = Field(
        "timing_results_bvg_all.csv", alias="TIMING_RESULTS_FILENAME"
    )
    sorted_output_template: str = Field(
        "sorted_services_{size}_std_sort.csv", alias="SORTED_OUTPUT_TEMPLATE"
    )

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_DATASET_SIZES", "Settings", "get_settings"]
