"""
Benchmark trajectories on the projection's quarter grid.

  index: investment * (1 + total_return - 3bps)^t
  pe:    investment * (1 + 1.2 * index_rate - 1.5%)^t, less 20% of any profit
  bonds: investment * 1.062^t
"""

from dataclasses import dataclass

import numpy as np

from gsi_projection.config import (
    BOND_RATE,
    PE_CARRY,
    ProjectionInputs,
)
from gsi_projection.errors import ValidationError


@dataclass
class BenchmarkPaths:
    spx: np.ndarray
    pe: np.ndarray
    bonds: np.ndarray


def _compound(investment: float, rate: float, t: np.ndarray, name: str) -> np.ndarray:
    if 1 + rate < 0:
        raise ValidationError(f"{name} annual rate {rate:.4f} is below -100%")
    return investment * np.power(1 + rate, t)


def compute_benchmarks(inputs: ProjectionInputs, t: np.ndarray) -> BenchmarkPaths:
    """All three benchmarks; t is in years and includes t=0."""
    investment = inputs.investment
    t = np.asarray(t, dtype=float)

    spx = _compound(investment, inputs.index_net_rate, t, "index")

    pe = _compound(investment, inputs.pe_net_rate, t, "private equity proxy")
    pe_profit = pe - investment
    pe = np.where(pe_profit > 0, pe - pe_profit * PE_CARRY, pe)

    bonds = _compound(investment, BOND_RATE, t, "bond")

    return BenchmarkPaths(spx=spx, pe=pe, bonds=bonds)
