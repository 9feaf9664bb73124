"""Multiple on invested capital and geometric annualised return."""

from dataclasses import dataclass

from gsi_projection.errors import ValidationError


@dataclass(frozen=True)
class ProjectionMetrics:
    initial_nav: float
    initial_notional: float
    final_value: float
    moic: float
    irr: float            # percent
    spx_final: float
    spx_moic: float
    spx_irr: float        # percent


def moic(final_value: float, investment: float) -> float:
    if not investment > 0:
        raise ValidationError(f"investment must be positive, got {investment}")
    return final_value / investment


def irr_pct(multiple: float, years: float) -> float:
    """(MOIC^(1/years) - 1) * 100. A wiped-out position reports -100%."""
    if not years > 0:
        raise ValidationError(f"years must be positive, got {years}")
    if multiple <= 0:
        return -100.0
    return (multiple ** (1 / years) - 1) * 100


def compute_metrics(
    investment: float,
    years: float,
    initial_nav: float,
    initial_notional: float,
    final_value: float,
    spx_final: float,
) -> ProjectionMetrics:
    strategy_moic = moic(final_value, investment)
    spx_moic = moic(spx_final, investment)
    return ProjectionMetrics(
        initial_nav=initial_nav,
        initial_notional=initial_notional,
        final_value=final_value,
        moic=strategy_moic,
        irr=irr_pct(strategy_moic, years),
        spx_final=spx_final,
        spx_moic=spx_moic,
        spx_irr=irr_pct(spx_moic, years),
    )
