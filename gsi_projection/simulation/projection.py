"""
Single entry point: inputs + reference portfolio -> series and metrics.

Usage:
    from gsi_projection import ProjectionInputs, demo_portfolio, run_projection
    result = run_projection(ProjectionInputs(years=5), demo_portfolio())
    result.series.to_frame()
"""

import logging
from dataclasses import dataclass
from datetime import date

import numpy as np
import pandas as pd

from gsi_projection.config import ProjectionInputs
from gsi_projection.errors import ValidationError
from gsi_projection.metrics.performance import ProjectionMetrics, compute_metrics
from gsi_projection.portfolio.reference import ReferencePortfolio
from gsi_projection.portfolio.scaler import scale_portfolio
from gsi_projection.simulation.benchmarks import compute_benchmarks
from gsi_projection.simulation.engine import ProjectionEngine
from gsi_projection.simulation.labels import quarter_labels

logger = logging.getLogger(__name__)

SERIES_KEYS = ("gsi", "credit", "options", "static", "spx", "pe", "bonds")


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class ProjectionSeries:
    labels: tuple[str, ...]
    gsi: np.ndarray             # strategy NAV, net of fees
    credit: np.ndarray
    options: np.ndarray
    static: np.ndarray          # intrinsic-only option line
    spx: np.ndarray
    pe: np.ndarray
    bonds: np.ndarray

    def __post_init__(self):
        for key in SERIES_KEYS:
            object.__setattr__(self, key, _frozen(getattr(self, key)))
        lengths = {len(getattr(self, key)) for key in SERIES_KEYS}
        lengths.add(len(self.labels))
        if len(lengths) != 1:
            raise ValidationError(f"series lengths differ: {sorted(lengths)}")

    def __len__(self):
        return len(self.gsi)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {key: getattr(self, key) for key in SERIES_KEYS},
            index=pd.Index(self.labels, name="period"),
        )

    def to_dict(self) -> dict:
        out = {"labels": list(self.labels)}
        for key in SERIES_KEYS:
            out[key] = getattr(self, key).tolist()
        return out


@dataclass(frozen=True)
class ProjectionResult:
    series: ProjectionSeries
    metrics: ProjectionMetrics


def run_projection(
    inputs: ProjectionInputs,
    portfolio: ReferencePortfolio,
    start_date: date | None = None,
) -> ProjectionResult:
    inputs.validate()
    state = scale_portfolio(portfolio, inputs.investment)

    paths = ProjectionEngine(inputs, state).project()
    bench = compute_benchmarks(inputs, paths.time_years)

    series = ProjectionSeries(
        labels=quarter_labels(inputs.steps, start_date),
        gsi=paths.total,
        credit=paths.credit,
        options=paths.options,
        static=paths.intrinsic,
        spx=bench.spx,
        pe=bench.pe,
        bonds=bench.bonds,
    )
    metrics = compute_metrics(
        investment=inputs.investment,
        years=inputs.years,
        initial_nav=state.initial_nav,
        initial_notional=state.initial_notional(inputs.current_spot),
        final_value=float(series.gsi[-1]),
        spx_final=float(series.spx[-1]),
    )
    logger.info(
        "Projection over %s years: MOIC %.2fx (IRR %.2f%%) vs index %.2fx",
        inputs.years, metrics.moic, metrics.irr, metrics.spx_moic,
    )
    return ProjectionResult(series=series, metrics=metrics)
