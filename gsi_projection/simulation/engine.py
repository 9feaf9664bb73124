"""
Quarterly projection of the hybrid credit + option strategy.

Every quarter q is marked directly from t = q/4 and the scaled initial state:
  S(t)      = S0 * (1 + g_price)^t
  credit(t) = C0 * (1 + g_credit)^t * (1 - m)^t
  option(t) = BS(S(t), K, years - t, r, sigma) * qty * (1 - m)^t
followed by a carry charge on profit above the investment, pro-rated between
the sleeves. Quarters do not depend on each other.
"""

import logging
from dataclasses import dataclass

import numpy as np

from gsi_projection.config import ProjectionInputs
from gsi_projection.errors import NumericDegeneracy, ValidationError
from gsi_projection.options.black_scholes import bs_call_price
from gsi_projection.portfolio.scaler import ScaledState

logger = logging.getLogger(__name__)

QUARTER = 0.25


@dataclass(frozen=True)
class QuarterMark:
    t: float
    spot: float
    credit: float
    option: float
    intrinsic: float
    carry: float = 0.0

    @property
    def total(self) -> float:
        return self.credit + self.option


@dataclass
class StrategyPaths:
    time_years: np.ndarray      # (steps+1,), includes t=0
    spot: np.ndarray
    total: np.ndarray
    credit: np.ndarray
    options: np.ndarray
    intrinsic: np.ndarray
    carry: np.ndarray


def carry_shares(credit: float, option: float) -> tuple[float, float]:
    """Split of a carry charge between the credit and option sleeves."""
    base = credit + option
    if base <= 0:
        raise NumericDegeneracy(f"cannot pro-rate carry over a NAV of {base}")
    credit_share = credit / base
    return credit_share, 1.0 - credit_share


def apply_carry(mark: QuarterMark, investment: float, carry_rate: float) -> QuarterMark:
    """Charge carry_rate of the profit above investment; no-op without profit."""
    profit = mark.total - investment
    if profit <= 0:
        return mark
    try:
        credit_share, option_share = carry_shares(mark.credit, mark.option)
    except NumericDegeneracy as exc:
        logger.warning("Skipping carry at t=%.2f: %s", mark.t, exc)
        return mark

    carry = profit * carry_rate
    return QuarterMark(
        t=mark.t,
        spot=mark.spot,
        credit=mark.credit - carry * credit_share,
        option=mark.option - carry * option_share,
        # Intrinsic line carries the option sleeve's charge to stay comparable
        intrinsic=mark.intrinsic - carry * option_share,
        carry=carry,
    )


class ProjectionEngine:
    """Re-prices the option sleeve each quarter and runs the fee waterfall."""

    def __init__(self, inputs: ProjectionInputs, state: ScaledState):
        if not state.weighted_strike > 0:
            raise ValidationError(
                f"weighted strike must be positive, got {state.weighted_strike}"
            )
        self.inputs = inputs
        self.state = state
        self.g_price = inputs.spx_price_return / 100
        self.g_credit = inputs.credit_yield / 100
        self.sigma = inputs.volatility / 100
        self.r = inputs.risk_free_rate / 100
        self.mgmt = inputs.mgmt_fee / 100
        self.carry_rate = inputs.carry_fee / 100

    def initial_mark(self) -> QuarterMark:
        spot = self.inputs.current_spot
        return QuarterMark(
            t=0.0,
            spot=spot,
            credit=self.state.credit_value,
            option=self.state.option_value,
            intrinsic=max(spot - self.state.weighted_strike, 0.0)
            * self.state.option_quantity,
        )

    def gross_mark(self, q: int) -> QuarterMark:
        """Quarter q before any fees."""
        t = q * QUARTER
        state = self.state
        spot = self.inputs.current_spot * (1 + self.g_price) ** t
        t_remaining = max(0.0, self.inputs.years - t)

        option_price = bs_call_price(
            spot, state.weighted_strike, t_remaining, self.r, self.sigma,
        )
        return QuarterMark(
            t=t,
            spot=spot,
            credit=state.credit_value * (1 + self.g_credit) ** t,
            option=option_price * state.option_quantity,
            intrinsic=max(spot - state.weighted_strike, 0.0) * state.option_quantity,
        )

    def mark(self, q: int) -> QuarterMark:
        """Quarter q net of management drag and carry."""
        gross = self.gross_mark(q)
        drag = (1 - self.mgmt) ** gross.t
        dragged = QuarterMark(
            t=gross.t,
            spot=gross.spot,
            credit=gross.credit * drag,
            option=gross.option * drag,
            intrinsic=gross.intrinsic * drag,
        )
        return apply_carry(dragged, self.inputs.investment, self.carry_rate)

    def project(self) -> StrategyPaths:
        steps = self.inputs.steps
        marks = [self.initial_mark()] + [self.mark(q) for q in range(1, steps + 1)]
        logger.debug(
            "Projected %d quarters, final NAV %.2f", steps, marks[-1].total,
        )

        def column(attr):
            return np.array([getattr(m, attr) for m in marks], dtype=float)

        return StrategyPaths(
            time_years=column("t"),
            spot=column("spot"),
            total=column("total"),
            credit=column("credit"),
            options=column("option"),
            intrinsic=column("intrinsic"),
            carry=column("carry"),
        )
