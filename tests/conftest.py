"""Shared test fixtures."""

import pytest

from analysis.samples import SampleSet
from config import Settings, configure_logging


@pytest.fixture(autouse=True, scope="session")
def _logging():
    """Configure structlog once for the whole run, as the entry points do."""
    configure_logging("tests", "WARNING", "console")


@pytest.fixture
def settings():
    """Test settings with console logging and small defaults."""
    return Settings(log_format="console", log_level="WARNING", forecast_periods=3)


@pytest.fixture
def records():
    return [
        "date,value",
        "2024-01-01,100",
        "2024-01-02,105",
        "2024-01-03,98",
        "2024-01-04,110",
        "2024-01-05,120",
    ]


@pytest.fixture
def five_samples():
    return SampleSet.from_values(
        [100, 105, 98, 110, 120],
        labels=["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05"],
    )
