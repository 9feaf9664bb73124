"""Quarterly projection of the hybrid strategy and its benchmarks."""
from .engine import ProjectionEngine, QuarterMark, StrategyPaths
from .benchmarks import BenchmarkPaths, compute_benchmarks
from .projection import ProjectionResult, ProjectionSeries, run_projection
