import pytest

from gsi_projection.config import ProjectionInputs
from gsi_projection.portfolio.reference import demo_portfolio


@pytest.fixture
def demo_inputs():
    """Demo scenario: investment equals the master cost basis, spot at strike."""
    return ProjectionInputs()


@pytest.fixture
def demo():
    return demo_portfolio()
