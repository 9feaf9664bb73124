"""Hybrid credit + option strategy projection engine."""
from gsi_projection.config import ProjectionInputs
from gsi_projection.errors import NumericDegeneracy, ValidationError
from gsi_projection.portfolio.reference import ReferencePortfolio, demo_portfolio
from gsi_projection.simulation.projection import (
    ProjectionResult,
    ProjectionSeries,
    run_projection,
)
