"""Centralized configuration using pydantic-settings. All values are env-configurable."""

from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TREND_")

    # Input parsing
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    time_column: int = Field(default=1, ge=1)
    data_column: int | None = Field(default=None, ge=1)  # None = last field

    # Analysis
    anomaly_threshold_sigma: float = Field(default=3.0, gt=0)
    forecast_periods: int = Field(default=5, ge=1)
    moving_average_window: int = Field(default=7, ge=1)
    seasonality_periods: Annotated[tuple[int, ...], NoDecode] = (7, 12, 24, 30)

    # Chart
    chart_width: int = Field(default=60, ge=1)
    chart_height: int = Field(default=20, ge=1)
    chart_mode: Literal["nearest", "minmax"] = "nearest"

    # Output
    output_format: Literal["text", "json", "csv"] = "text"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("seasonality_periods", mode="before")
    @classmethod
    def _split_periods(cls, value):
        if isinstance(value, str):
            value = [p for p in value.split(",") if p.strip()]
        return tuple(int(p) for p in value)

    @field_validator("seasonality_periods")
    @classmethod
    def _positive_periods(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if any(p < 1 for p in value):
            raise ValueError("seasonality periods must be positive")
        return value
