"""Tests for the quarterly projection engine and the carry waterfall."""
import logging
import math
from dataclasses import replace

import numpy as np
import pytest

from gsi_projection.errors import NumericDegeneracy
from gsi_projection.options.black_scholes import bs_call_price
from gsi_projection.portfolio.scaler import scale_portfolio
from gsi_projection.simulation.engine import (
    ProjectionEngine,
    QuarterMark,
    apply_carry,
    carry_shares,
)


def _engine(inputs, portfolio):
    return ProjectionEngine(inputs, scale_portfolio(portfolio, inputs.investment))


# ── Engine tests ──

def test_paths_shape(demo_inputs, demo):
    paths = _engine(demo_inputs, demo).project()
    assert paths.total.shape == (41,)
    np.testing.assert_allclose(paths.time_years, np.arange(41) * 0.25)


def test_initial_point_is_scaled_state(demo_inputs, demo):
    paths = _engine(demo_inputs, demo).project()
    assert paths.credit[0] == pytest.approx(3489323.60)
    assert paths.options[0] == pytest.approx(3126483.16)
    assert paths.intrinsic[0] == 0.0
    assert paths.total[0] == pytest.approx(3489323.60 + 3126483.16)


def test_first_year_by_hand(demo_inputs, demo):
    mark = _engine(demo_inputs, demo).mark(4)

    spot = 563.22 * 1.08
    drag = 0.985
    credit = 3489323.60 * 1.05 * drag
    option = bs_call_price(spot, 563.22, 9.0, 0.04, 0.15) * 33871 * drag
    intrinsic = (spot - 563.22) * 33871 * drag

    profit = credit + option - demo_inputs.investment
    if profit > 0:
        carry = profit * 0.20
        credit_share = credit / (credit + option)
        credit -= carry * credit_share
        option -= carry * (1 - credit_share)
        intrinsic -= carry * (1 - credit_share)

    assert mark.spot == pytest.approx(spot)
    assert mark.credit == pytest.approx(credit)
    assert mark.option == pytest.approx(option)
    assert mark.intrinsic == pytest.approx(intrinsic)


def test_option_converges_to_intrinsic(demo_inputs, demo):
    paths = _engine(demo_inputs, demo).project()
    assert paths.options[-1] == pytest.approx(paths.intrinsic[-1])


def test_quarters_are_independent(demo_inputs, demo):
    engine = _engine(demo_inputs, demo)
    paths = engine.project()
    for q in (37, 3, 20, 1):
        assert engine.mark(q).total == pytest.approx(paths.total[q])


def test_carry_only_charged_on_profit(demo_inputs, demo):
    investment = demo_inputs.investment
    no_carry = _engine(replace(demo_inputs, carry_fee=0.0), demo)
    with_carry = _engine(demo_inputs, demo)

    for q in range(1, demo_inputs.steps + 1):
        pre = no_carry.mark(q)
        post = with_carry.mark(q)
        if pre.total <= investment:
            assert post == pre
        else:
            assert post.total == pytest.approx(investment + 0.8 * (pre.total - investment))
            assert post.carry == pytest.approx(0.2 * (pre.total - investment))


def test_carry_keeps_option_and_intrinsic_gap(demo_inputs, demo):
    no_carry = _engine(replace(demo_inputs, carry_fee=0.0), demo).mark(20)
    with_carry = _engine(demo_inputs, demo).mark(20)
    assert with_carry.option - with_carry.intrinsic == pytest.approx(
        no_carry.option - no_carry.intrinsic
    )


def test_management_drag_compounds(demo_inputs, demo):
    free = _engine(replace(demo_inputs, mgmt_fee=0.0, carry_fee=0.0), demo).mark(8)
    charged = _engine(replace(demo_inputs, carry_fee=0.0), demo).mark(8)
    assert charged.credit == pytest.approx(free.credit * 0.985 ** 2)
    assert charged.option == pytest.approx(free.option * 0.985 ** 2)


def test_full_fee_wipes_out_strategy(demo_inputs, demo):
    paths = _engine(replace(demo_inputs, mgmt_fee=100.0), demo).project()
    np.testing.assert_allclose(paths.total[1:], 0.0)
    assert not np.any(np.isnan(paths.total))


def test_zero_volatility_projects(demo_inputs, demo):
    paths = _engine(replace(demo_inputs, volatility=0.0), demo).project()
    assert np.all(np.isfinite(paths.options))


# ── Carry waterfall ──

def test_apply_carry_without_profit_is_identity():
    mark = QuarterMark(t=1.0, spot=100.0, credit=40.0, option=50.0, intrinsic=30.0)
    assert apply_carry(mark, investment=100.0, carry_rate=0.2) is mark


def test_apply_carry_pro_rates():
    mark = QuarterMark(t=1.0, spot=100.0, credit=90.0, option=30.0, intrinsic=20.0)
    charged = apply_carry(mark, investment=100.0, carry_rate=0.2)
    # profit 20, carry 4, split 3 / 1
    assert charged.carry == pytest.approx(4.0)
    assert charged.credit == pytest.approx(87.0)
    assert charged.option == pytest.approx(29.0)
    assert charged.intrinsic == pytest.approx(19.0)
    assert charged.total == pytest.approx(116.0)


def test_carry_shares_degenerate():
    with pytest.raises(NumericDegeneracy):
        carry_shares(0.0, 0.0)
    assert carry_shares(1.0, 3.0) == (0.25, 0.75)


def test_degenerate_carry_is_skipped(caplog):
    mark = QuarterMark(t=2.0, spot=100.0, credit=0.0, option=0.0, intrinsic=0.0)
    with caplog.at_level(logging.WARNING):
        charged = apply_carry(mark, investment=-1.0, carry_rate=0.2)
    assert charged is mark
    assert "Skipping carry" in caplog.text
    assert not math.isnan(charged.total)
