"""
CLI runner for the hybrid strategy projection.

Usage:
    python -m gsi_projection.runner
    python -m gsi_projection.runner --investment 1000000 --years 7 --vol 20
    python -m gsi_projection.runner --csv projection.csv --start-date 2026-01-15
"""

import argparse
import logging
from datetime import date

from gsi_projection.config import ProjectionInputs
from gsi_projection.portfolio.reference import demo_portfolio
from gsi_projection.simulation.projection import run_projection


def _print_summary(inputs, result):
    m = result.metrics
    s = result.series
    print("\n" + "=" * 60)
    print(f"  HYBRID CREDIT + OPTION PROJECTION  ({inputs.years} years)")
    print("=" * 60)
    print(f"  Investment:       ${inputs.investment:>16,.2f}")
    print(f"  Initial NAV:      ${m.initial_nav:>16,.2f}")
    print(f"  Initial Notional: ${m.initial_notional:>16,.2f}")
    print("  " + "-" * 56)
    print(f"  Final Value:      ${m.final_value:>16,.2f}")
    print(f"    Credit:         ${s.credit[-1]:>16,.2f}")
    print(f"    Options:        ${s.options[-1]:>16,.2f}")
    print(f"  MOIC:              {m.moic:>16.2f}x")
    print(f"  IRR:               {m.irr:>16.2f}%")
    print("  " + "-" * 56)
    print(f"  Index Final:      ${m.spx_final:>16,.2f}")
    print(f"  Index MOIC:        {m.spx_moic:>16.2f}x")
    print(f"  Index IRR:         {m.spx_irr:>16.2f}%")
    print(f"  PE Proxy Final:   ${s.pe[-1]:>16,.2f}")
    print(f"  Bonds Final:      ${s.bonds[-1]:>16,.2f}")
    print("=" * 60)


def run(args=None):
    defaults = ProjectionInputs()
    parser = argparse.ArgumentParser(
        description="Project a hybrid credit + option strategy against benchmarks"
    )
    parser.add_argument("--investment", type=float, default=defaults.investment,
                        help="Amount invested (default: demo cost basis)")
    parser.add_argument("--spot", type=float, default=defaults.current_spot,
                        help="Current index spot (default: %(default)s)")
    parser.add_argument("--spx-return", type=float, default=defaults.spx_price_return,
                        help="Index price return, %% p.a. (default: %(default)s)")
    parser.add_argument("--spx-div", type=float, default=defaults.spx_div_yield,
                        help="Index dividend yield, %% p.a. (default: %(default)s)")
    parser.add_argument("--credit-yield", type=float, default=defaults.credit_yield,
                        help="Credit sleeve yield, %% p.a. (default: %(default)s)")
    parser.add_argument("--vol", type=float, default=defaults.volatility,
                        help="Implied volatility, %% p.a. (default: %(default)s)")
    parser.add_argument("--mgmt-fee", type=float, default=defaults.mgmt_fee,
                        help="Management fee, %% p.a. (default: %(default)s)")
    parser.add_argument("--carry", type=float, default=defaults.carry_fee,
                        help="Carry, %% of profit (default: %(default)s)")
    parser.add_argument("--rf", type=float, default=defaults.risk_free_rate,
                        help="Risk-free rate, %% p.a. (default: %(default)s)")
    parser.add_argument("--years", type=int, default=defaults.years,
                        help="Horizon in years (default: %(default)s)")
    parser.add_argument("--start-date", type=date.fromisoformat, default=None,
                        help="First period label date, YYYY-MM-DD (default: today)")
    parser.add_argument("--csv", default=None,
                        help="Write the quarterly series to this CSV path")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")

    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    inputs = ProjectionInputs(
        investment=parsed.investment,
        current_spot=parsed.spot,
        spx_price_return=parsed.spx_return,
        spx_div_yield=parsed.spx_div,
        credit_yield=parsed.credit_yield,
        volatility=parsed.vol,
        mgmt_fee=parsed.mgmt_fee,
        carry_fee=parsed.carry,
        risk_free_rate=parsed.rf,
        years=parsed.years,
    )

    result = run_projection(inputs, demo_portfolio(), start_date=parsed.start_date)
    _print_summary(inputs, result)

    if parsed.csv:
        result.series.to_frame().to_csv(parsed.csv)
        print(f"\nSeries written to {parsed.csv}")

    return result


def main():
    run()


if __name__ == "__main__":
    main()
