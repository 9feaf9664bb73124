"""Scale the reference portfolio to a target investment."""

import logging
from dataclasses import dataclass
from functools import reduce

from gsi_projection.errors import ValidationError
from gsi_projection.portfolio.reference import (
    CreditPosition,
    OptionPosition,
    ReferencePortfolio,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaledState:
    credit_value: float = 0.0
    option_value: float = 0.0
    option_quantity: float = 0.0
    weighted_strike: float = 0.0

    @property
    def initial_nav(self) -> float:
        return self.credit_value + self.option_value

    def initial_notional(self, spot: float) -> float:
        return self.credit_value + self.option_quantity * spot


def _accumulate(state: ScaledState, position, ratio: float) -> ScaledState:
    if isinstance(position, CreditPosition):
        return ScaledState(
            credit_value=state.credit_value + position.current_value * ratio,
            option_value=state.option_value,
            option_quantity=state.option_quantity,
            weighted_strike=state.weighted_strike,
        )
    if isinstance(position, OptionPosition):
        # Single-strike model: the last option row's strike is used unscaled
        return ScaledState(
            credit_value=state.credit_value,
            option_value=state.option_value + position.current_value * ratio,
            option_quantity=state.option_quantity + position.quantity * ratio,
            weighted_strike=position.strike,
        )
    raise ValidationError(f"unknown reference position: {position!r}")


def scale_portfolio(portfolio: ReferencePortfolio, investment: float) -> ScaledState:
    """Scale every sleeve by investment / master cost basis."""
    if not portfolio.master_cost_basis > 0:
        raise ValidationError(
            f"master cost basis must be positive, got {portfolio.master_cost_basis}"
        )
    if not investment > 0:
        raise ValidationError(f"investment must be positive, got {investment}")

    if len(portfolio.credit) != 1 or len(portfolio.options) != 1:
        logger.warning(
            "Expected one credit and one option position, got %d and %d",
            len(portfolio.credit), len(portfolio.options),
        )

    ratio = investment / portfolio.master_cost_basis
    state = reduce(
        lambda acc, pos: _accumulate(acc, pos, ratio),
        portfolio.positions,
        ScaledState(),
    )
    logger.debug("Scaled portfolio by %.6f: %s", ratio, state)
    return state
