"""Request schemas for the analysis endpoint."""

from typing import Literal

from pydantic import BaseModel, Field

ReportName = Literal[
    "analyze",
    "forecast",
    "anomalies",
    "growth",
    "seasonality",
    "moving_average",
    "chart",
    "correlation",
]


class AnalysisOptions(BaseModel):
    """Per-request overrides; unset fields fall back to the server settings."""

    anomaly_threshold_sigma: float | None = None
    forecast_periods: int | None = None
    moving_average_window: int | None = None
    seasonality_periods: list[int] | None = None
    chart_width: int | None = Field(default=None, ge=1, le=500)
    chart_height: int | None = Field(default=None, ge=1, le=200)
    chart_mode: Literal["nearest", "minmax"] | None = None


class AnalysisRequest(BaseModel):
    records: list[str] = Field(description="Delimiter-separated text lines, optional header first")
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    time_column: int = Field(default=1, ge=1)
    data_column: int | None = Field(default=None, ge=1)
    reports: list[ReportName] = Field(default_factory=list)
    correlation_records: list[str] | None = None
    options: AnalysisOptions = Field(default_factory=AnalysisOptions)
