"""Command-line entry point for the trend analyzer."""

import argparse
import sys

from pydantic import ValidationError

from config import Settings, configure_logging
from analysis.engine import TrendEngine
from analysis.errors import ConfigurationError, TrendAnalysisError
from analysis.render import RENDERERS

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="trend-analyzer",
        description="Time-series trend analysis: statistics, forecasts, anomalies, seasonality.",
    )
    parser.add_argument("-f", "--file", required=True, help="Input data file (CSV or text)")
    parser.add_argument("-c", "--column", type=int, help="Column number to analyze (default: last)")
    parser.add_argument("-d", "--delimiter", help="Field delimiter (default: comma)")
    parser.add_argument("-t", "--time-col", type=int, help="Time/date column number (default: 1)")
    parser.add_argument("--analyze", action="store_true", help="Descriptive statistics and trend direction")
    parser.add_argument("--forecast", type=int, metavar="PERIODS", default=0, help="Forecast N periods ahead")
    parser.add_argument("--anomalies", action="store_true", help="Detect statistical outliers")
    parser.add_argument("--threshold", type=float, metavar="SIGMA", help="Anomaly threshold (default: 3 sigma)")
    parser.add_argument("--moving-avg", type=int, metavar="WINDOW", default=0, help="Trailing moving average")
    parser.add_argument("--growth", action="store_true", help="Period-over-period growth rates")
    parser.add_argument("--seasonality", action="store_true", help="Detect repeating patterns")
    parser.add_argument(
        "--periods",
        type=lambda v: [int(p) for p in v.split(",") if p.strip()],
        help="Comma-separated seasonality candidate periods (default: 7,12,24,30)",
    )
    parser.add_argument("--correlation", metavar="FILE", help="Correlate with another dataset")
    parser.add_argument("--chart", action="store_true", help="ASCII area chart")
    parser.add_argument("--chart-mode", choices=["nearest", "minmax"], help="Column sampling for --chart")
    parser.add_argument("--width", type=int, help="Chart width (default: 60)")
    parser.add_argument("--height", type=int, help="Chart height (default: 20)")
    parser.add_argument("-o", "--output", help="Write results to file instead of stdout")
    parser.add_argument("--format", choices=sorted(RENDERERS), help="Output format (default: text)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def build_settings(args) -> Settings:
    """Overlay explicit flags onto env-derived settings."""
    overrides = {
        "data_column": args.column,
        "delimiter": args.delimiter,
        "time_column": args.time_col,
        "anomaly_threshold_sigma": args.threshold,
        "seasonality_periods": args.periods,
        "chart_mode": args.chart_mode,
        "chart_width": args.width,
        "chart_height": args.height,
        "output_format": args.format,
    }
    if args.forecast:
        overrides["forecast_periods"] = args.forecast
    if args.moving_avg:
        overrides["moving_average_window"] = args.moving_avg
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def requested_reports(args) -> list[str]:
    if args.forecast < 0:
        raise ConfigurationError(f"forecast periods must be >= 1, got {args.forecast}")
    if args.moving_avg < 0:
        raise ConfigurationError(f"moving average window must be >= 1, got {args.moving_avg}")

    reports = []
    if args.analyze:
        reports.append("analyze")
    if args.forecast:
        reports.append("forecast")
    if args.anomalies:
        reports.append("anomalies")
    if args.growth:
        reports.append("growth")
    if args.seasonality:
        reports.append("seasonality")
    if args.moving_avg:
        reports.append("moving_average")
    if args.chart:
        reports.append("chart")
    if args.correlation:
        reports.append("correlation")
    return reports


def _iter_lines(path: str):
    """Lazily yield lines; undecodable bytes become U+FFFD and fail the numeric check."""
    with open(path, encoding="utf-8", errors="replace") as fh:
        yield from fh


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
        reports = requested_reports(args)
    except (ValidationError, ConfigurationError) as e:
        print(f"Error: invalid argument: {e}", file=sys.stderr)
        return EXIT_USAGE

    log = configure_logging("trend-analyzer", settings.log_level, settings.log_format)
    engine = TrendEngine(settings, log=log)
    try:
        other = _iter_lines(args.correlation) if args.correlation else None
        result = engine.run(_iter_lines(args.file), reports, correlation_records=other)
    except OSError as e:
        print(f"Error: {e.strerror}: {e.filename}", file=sys.stderr)
        return EXIT_ERROR
    except ConfigurationError as e:
        print(f"Error: invalid argument: {e}", file=sys.stderr)
        return EXIT_USAGE
    except TrendAnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    output = RENDERERS[settings.output_format](result)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(output)
        log.info("results_written", path=args.output)
    else:
        sys.stdout.write(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
