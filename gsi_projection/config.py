import math
from dataclasses import dataclass, fields

from gsi_projection.errors import ValidationError

# Benchmark constants (annual, decimal)
INDEX_DRAG = 0.0003
PE_BETA = 1.2
PE_MGMT = 0.015
PE_CARRY = 0.20
BOND_RATE = 0.062

# camelCase keys used by the chart layer's option bag
_CAMEL_KEYS = {
    "currentSpot": "current_spot",
    "spxPriceReturn": "spx_price_return",
    "spxDivYield": "spx_div_yield",
    "creditYield": "credit_yield",
    "mgmtFee": "mgmt_fee",
    "carryFee": "carry_fee",
    "riskFreeRate": "risk_free_rate",
}


@dataclass(frozen=True)
class ProjectionInputs:
    """Projection parameters. Rates and fees are annual percentages."""

    investment: float = 7_289_316.47
    current_spot: float = 563.22

    # Index
    spx_price_return: float = 8.0
    spx_div_yield: float = 1.3

    # Sleeves
    credit_yield: float = 5.0
    volatility: float = 15.0
    risk_free_rate: float = 4.0

    # Fees
    mgmt_fee: float = 1.5
    carry_fee: float = 20.0   # % of profit above investment

    years: int = 10

    @property
    def steps(self) -> int:
        return int(round(self.years)) * 4

    @property
    def index_net_rate(self) -> float:
        """Index total return less the fixed drag, as a decimal."""
        return (self.spx_price_return + self.spx_div_yield) / 100 - INDEX_DRAG

    @property
    def pe_net_rate(self) -> float:
        """Levered index return less the proxy's management fee, as a decimal."""
        return self.index_net_rate * PE_BETA - PE_MGMT

    def validate(self) -> "ProjectionInputs":
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValidationError(f"{f.name} must be finite, got {value}")
        if not self.investment > 0:
            raise ValidationError(f"investment must be positive, got {self.investment}")
        if not self.current_spot > 0:
            raise ValidationError(f"current_spot must be positive, got {self.current_spot}")
        if not self.years > 0:
            raise ValidationError(f"years must be positive, got {self.years}")
        if not math.isclose(self.years, round(self.years)):
            raise ValidationError(f"years must be a whole number, got {self.years}")
        if self.volatility < 0:
            raise ValidationError(f"volatility must be non-negative, got {self.volatility}")
        for name in ("mgmt_fee", "carry_fee"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValidationError(f"{name} must be within [0, 100], got {value}")
        if 1 + self.credit_yield / 100 < 0:
            raise ValidationError(
                f"credit_yield must be at least -100%, got {self.credit_yield}"
            )
        # A zero future spot cannot be priced
        if 1 + self.spx_price_return / 100 <= 0:
            raise ValidationError(
                f"spx_price_return must be above -100%, got {self.spx_price_return}"
            )
        for name, rate in (("index", self.index_net_rate),
                           ("private equity proxy", self.pe_net_rate)):
            if 1 + rate < 0:
                raise ValidationError(f"{name} annual rate {rate:.4f} is below -100%")
        return self

    @classmethod
    def from_mapping(cls, options: dict) -> "ProjectionInputs":
        """Build from snake_case or camelCase keys; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in known:
                raise ValidationError(f"unrecognised projection input: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)
