"""
Reference portfolio: the credit and option sleeves at reference scale.

A projection scales these values by investment / master cost basis.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from gsi_projection.errors import ValidationError


class PositionKind(Enum):
    CREDIT = "Credit"
    OPTION = "Option"


@dataclass(frozen=True)
class CreditPosition:
    cost_basis: float
    current_value: float

    kind = PositionKind.CREDIT


@dataclass(frozen=True)
class OptionPosition:
    cost_basis: float
    current_value: float
    strike: float
    quantity: float
    expiration: date | None = None

    kind = PositionKind.OPTION


ReferencePosition = CreditPosition | OptionPosition


@dataclass(frozen=True)
class ReferencePortfolio:
    positions: tuple[ReferencePosition, ...]
    master_cost_basis: float | None = None

    def __post_init__(self):
        object.__setattr__(self, "positions", tuple(self.positions))
        if self.master_cost_basis is None:
            object.__setattr__(
                self, "master_cost_basis",
                sum(p.cost_basis for p in self.positions),
            )

    @property
    def credit(self) -> tuple[CreditPosition, ...]:
        return tuple(p for p in self.positions if p.kind is PositionKind.CREDIT)

    @property
    def options(self) -> tuple[OptionPosition, ...]:
        return tuple(p for p in self.positions if p.kind is PositionKind.OPTION)

    @classmethod
    def from_rows(cls, rows, master_cost_basis=None) -> "ReferencePortfolio":
        """Build from table rows keyed Type/CostBasis/CurrentValue/Strike/Quantity."""
        positions = []
        for row in rows:
            kind = PositionKind(row["Type"])
            if kind is PositionKind.CREDIT:
                positions.append(CreditPosition(
                    cost_basis=float(row["CostBasis"]),
                    current_value=float(row["CurrentValue"]),
                ))
            else:
                expiry = row.get("ExpirationDate")
                positions.append(OptionPosition(
                    cost_basis=float(row["CostBasis"]),
                    current_value=float(row["CurrentValue"]),
                    strike=float(row["Strike"]),
                    quantity=float(row["Quantity"]),
                    expiration=date.fromisoformat(expiry) if expiry else None,
                ))
        if not positions:
            raise ValidationError("reference portfolio has no positions")
        return cls(positions=tuple(positions), master_cost_basis=master_cost_basis)


DEMO_ROWS = [
    {"Type": "Credit", "CostBasis": 3489323.60, "CurrentValue": 3489323.60,
     "Strike": None, "Quantity": None, "ExpirationDate": None},
    {"Type": "Option", "CostBasis": 3799992.87, "CurrentValue": 3126483.16,
     "Strike": 563.22, "Quantity": 33871, "ExpirationDate": "2036-01-15"},
]

MASTER_COST_BASIS = 7289316.47


def demo_portfolio() -> ReferencePortfolio:
    """The demo credit + LEAPS book used by the simulator."""
    return ReferencePortfolio.from_rows(DEMO_ROWS, master_cost_basis=MASTER_COST_BASIS)
