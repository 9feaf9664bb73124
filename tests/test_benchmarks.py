import numpy as np
import pytest

from gsi_projection.config import ProjectionInputs
from gsi_projection.errors import ValidationError
from gsi_projection.simulation.benchmarks import compute_benchmarks

T = np.arange(41) * 0.25


def test_start_at_investment(demo_inputs):
    bench = compute_benchmarks(demo_inputs, T)
    for path in (bench.spx, bench.pe, bench.bonds):
        assert path.shape == (41,)
        assert path[0] == pytest.approx(demo_inputs.investment)


def test_index_rate(demo_inputs):
    assert demo_inputs.index_net_rate == pytest.approx(0.0927)
    assert demo_inputs.pe_net_rate == pytest.approx(0.09624)


def test_one_year_values():
    inputs = ProjectionInputs(investment=1_000_000.0)
    bench = compute_benchmarks(inputs, np.array([0.0, 1.0]))
    assert bench.spx[1] == pytest.approx(1_092_700.0)
    # 1.2 * 9.27% - 1.5% = 9.624%, less 20% of the profit
    assert bench.pe[1] == pytest.approx(1_000_000.0 + 0.8 * 96_240.0)
    assert bench.bonds[1] == pytest.approx(1_062_000.0)


def test_pe_no_carry_on_losses():
    inputs = ProjectionInputs(investment=100.0, spx_price_return=-10.0, spx_div_yield=0.0)
    bench = compute_benchmarks(inputs, np.array([0.0, 2.0]))
    rate = 1.2 * (-0.1 - 0.0003) - 0.015
    assert bench.pe[1] == pytest.approx(100.0 * (1 + rate) ** 2)
    assert bench.pe[1] < 100.0


def test_pe_rate_below_minus_100_rejected():
    inputs = ProjectionInputs(spx_price_return=-90.0, spx_div_yield=0.0)
    with pytest.raises(ValidationError, match="private equity"):
        compute_benchmarks(inputs, T)
