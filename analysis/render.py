"""Text, JSON and CSV views of an AnalysisResult."""

import csv
import io
import json
from dataclasses import asdict

from analysis.anomaly import AnomalyReport
from analysis.chart import ChartGrid
from analysis.correlation import CorrelationResult
from analysis.engine import AnalysisResult, ForecastReport, MovingAverageReport, Overview
from analysis.growth import GrowthRate
from analysis.seasonality import SeasonalityScore

RULE = "=" * 70


def _trend_dict(trend):
    if trend is None:
        return None
    return {**asdict(trend), "direction": trend.direction}


def report_to_dict(report):
    if isinstance(report, Overview):
        return {
            "summary": {**asdict(report.summary), "range": report.summary.range},
            "trend": _trend_dict(report.trend),
            "direction": report.direction,
            "total_growth_percent": report.total_growth_percent,
            "coefficient_of_variation": report.coefficient_of_variation,
            "volatility": report.volatility,
        }
    if isinstance(report, ForecastReport):
        return {
            "trend": _trend_dict(report.trend),
            "margin": report.margin,
            "points": [asdict(p) for p in report.points],
        }
    if isinstance(report, AnomalyReport):
        return {**asdict(report), "count": report.count}
    if isinstance(report, ChartGrid):
        return {
            "width": report.width,
            "height": report.height,
            "min": report.min_value,
            "max": report.max_value,
            "count": report.count,
            "lines": report.lines(),
        }
    if isinstance(report, CorrelationResult):
        return {**asdict(report), "strength": report.strength}
    if isinstance(report, MovingAverageReport):
        return asdict(report)
    if isinstance(report, list):
        items = []
        for item in report:
            d = asdict(item)
            if isinstance(item, SeasonalityScore):
                d["strength"] = item.strength
            items.append(d)
        return items
    raise TypeError(f"unsupported report type: {type(report).__name__}")


def result_to_dict(result: AnalysisResult) -> dict:
    return {
        "sample_count": result.sample_count,
        "skipped_lines": result.skipped_lines,
        "reports": {name: report_to_dict(r) for name, r in result.reports.items()},
        "skipped": [asdict(s) for s in result.skipped],
    }


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result_to_dict(result), indent=2, ensure_ascii=False)


def _fmt(value, fmt=".4f", missing="N/A") -> str:
    return missing if value is None else format(value, fmt)


def _text_overview(r: Overview) -> list[str]:
    s = r.summary
    lines = [
        "TREND ANALYSIS",
        RULE,
        "Descriptive Statistics:",
        f"  Sample Size: {s.count}",
        f"  Mean:        {s.mean:.4f}",
        f"  Std Dev:     {s.stddev:.4f}",
        f"  Min:         {s.min:.4f}",
        f"  Max:         {s.max:.4f}",
        f"  Range:       {s.range:.4f}",
        "",
        "Trend Analysis:",
    ]
    if r.trend is None:
        lines.append("  Trend unavailable (fewer than 2 samples)")
    else:
        arrows = {"increasing": "↑ Increasing", "decreasing": "↓ Decreasing", "stable": "→ Stable"}
        lines += [
            f"  Slope:       {r.trend.slope:.6f}",
            f"  Intercept:   {r.trend.intercept:.6f}",
            f"  R²:          {r.trend.r_squared:.4f}",
            f"  Direction:   {arrows[r.direction]}",
        ]
    lines += [
        f"  Total Growth: {_fmt(r.total_growth_percent, '.2f')}%",
        "",
        "Volatility:",
        f"  Coefficient of Variation: {_fmt(r.coefficient_of_variation, '.2f')}%",
    ]
    if r.volatility:
        lines.append(f"  Assessment: {r.volatility.capitalize()} volatility")
    return lines


def _text_forecast(r: ForecastReport) -> list[str]:
    lines = ["TREND FORECAST", RULE, f"Forecasting {len(r.points)} periods ahead...", "", "Forecast:"]
    lines += [f"  Period +{p.period_offset}: {p.value:.4f}" for p in r.points]
    lines += ["", "95% Confidence Intervals:"]
    lines += [
        f"  Period +{p.period_offset}: [{p.lower_bound:.4f}, {p.upper_bound:.4f}]"
        for p in r.points
    ]
    return lines


def _text_anomalies(r: AnomalyReport) -> list[str]:
    lines = [
        f"Anomaly Detection ({r.threshold:g}σ):",
        f"Mean: {r.mean:.4f}, StdDev: {r.stddev:.4f}",
        f"Bounds: [{r.lower_bound:.4f}, {r.upper_bound:.4f}]",
        "",
    ]
    lines += [f"Anomaly at {a.label}: {a.value:g} ({a.severity})" for a in r.flagged]
    lines += ["", f"Total anomalies detected: {r.count}"]
    return lines


def _text_growth(rates: list[GrowthRate]) -> list[str]:
    lines = ["GROWTH RATE ANALYSIS", RULE, "Period-over-Period Growth Rates:"]
    for g in rates:
        if g.baseline:
            lines.append(f"  Period {g.period}: {g.value:.4f} (baseline)")
        elif g.growth_percent is None:
            lines.append(f"  Period {g.period}: {g.value:.4f} (N/A)")
        else:
            lines.append(f"  Period {g.period}: {g.value:.4f} ({g.growth_percent:+.2f}%)")
    return lines


def _text_seasonality(scores: list[SeasonalityScore]) -> list[str]:
    lines = ["SEASONALITY DETECTION", RULE]
    if not scores:
        lines.append("Series too short for any candidate period")
    for sc in scores:
        lines.append(
            f"Period {sc.period}: Autocorrelation = {sc.score:.4f}"
            f" (normalized: {_fmt(sc.normalized)})"
        )
        if sc.strength != "none":
            lines.append(f"  {sc.strength.capitalize()} seasonality detected")
    return lines


def _text_moving_average(r: MovingAverageReport) -> list[str]:
    lines = [f"MOVING AVERAGE (window={r.window})", RULE]
    lines += [f"  {label}: {v:.4f}" for label, v in zip(r.labels, r.values)]
    return lines


def _text_chart(r: ChartGrid) -> list[str]:
    return [
        "DATA VISUALIZATION",
        RULE,
        *r.lines(),
        "",
        f"Data points: {r.count}",
        f"Range: [{r.min_value:g}, {r.max_value:g}]",
    ]


def _text_correlation(r: CorrelationResult) -> list[str]:
    return [
        "CORRELATION",
        RULE,
        f"  Pearson r:   {r.coefficient:.4f}",
        f"  Pairs:       {r.pairs}",
        f"  Strength:    {r.strength}",
    ]


_TEXT = {
    "analyze": _text_overview,
    "forecast": _text_forecast,
    "anomalies": _text_anomalies,
    "growth": _text_growth,
    "seasonality": _text_seasonality,
    "moving_average": _text_moving_average,
    "chart": _text_chart,
    "correlation": _text_correlation,
}


def render_text(result: AnalysisResult) -> str:
    blocks = ["\n".join(_TEXT[name](r)) for name, r in result.reports.items()]
    if result.skipped:
        notes = ["Skipped reports:"]
        notes += [f"  {s.name}: {s.reason}" for s in result.skipped]
        blocks.append("\n".join(notes))
    return "\n\n".join(blocks) + "\n"


def _flatten(prefix: str, value, rows: list):
    if isinstance(value, dict):
        for k, v in value.items():
            _flatten(f"{prefix}.{k}" if prefix else k, v, rows)
    elif isinstance(value, list):
        for i, v in enumerate(value):
            _flatten(f"{prefix}[{i}]", v, rows)
    else:
        rows.append((prefix, "" if value is None else value))


def render_csv(result: AnalysisResult) -> str:
    """One ``report,key,value`` row per scalar in the JSON view."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["report", "key", "value"])
    data = result_to_dict(result)
    for name, report in data["reports"].items():
        rows: list = []
        _flatten("", report, rows)
        for key, value in rows:
            writer.writerow([name, key, value])
    for s in data["skipped"]:
        writer.writerow(["skipped", s["name"], s["reason"]])
    return buf.getvalue()


RENDERERS = {"text": render_text, "json": render_json, "csv": render_csv}
