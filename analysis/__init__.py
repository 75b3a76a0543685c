from .engine import AnalysisResult, TrendEngine
from .samples import Sample, SampleSet, load_samples

__all__ = ["AnalysisResult", "TrendEngine", "Sample", "SampleSet", "load_samples"]
