"""Exception taxonomy for the trend analysis engine."""


class TrendAnalysisError(Exception):
    """Base class for every error raised by the engine."""


class EmptyDatasetError(TrendAnalysisError):
    """No numeric samples survived loading. Fatal for the whole run."""


class EmptySeriesError(TrendAnalysisError):
    """An empty slice reached the statistics layer."""


class DegenerateTrendError(TrendAnalysisError):
    """The OLS denominator is zero, so no trend line exists (N <= 1)."""


class DegenerateCorrelationError(TrendAnalysisError):
    """Fewer than two paired points, or one side has zero variance."""


class ConfigurationError(TrendAnalysisError):
    """A caller-supplied option is out of range."""


class InvalidHorizonError(ConfigurationError):
    pass


class InvalidWindowError(ConfigurationError):
    pass


class InvalidThresholdError(ConfigurationError):
    pass
