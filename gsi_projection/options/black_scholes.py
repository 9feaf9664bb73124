"""
Pure-Python Black-Scholes call pricing (no scipy dependency).

The drift term in d1 is 0.5 * sigma^2 only; the risk-free rate enters through
the discount factor alone. Projection outputs are calibrated against this form.
"""

import math

from gsi_projection.errors import ValidationError

# Below this many years the option is marked at intrinsic value.
EXPIRY_EPSILON = 0.001


def norm_cdf(z: float) -> float:
    """Standard normal CDF via Zelen & Severo (A&S 26.2.17). Max err ~7.5e-8."""
    b1, b2, b3, b4, b5 = (
        0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429,
    )
    p = 0.2316419
    c = 0.39894228
    if z > 6.0:
        return 1.0
    if z < -6.0:
        return 0.0
    a = abs(z)
    t = 1.0 / (1.0 + a * p)
    b = c * math.exp(-z * z / 2.0)
    n = ((((b5 * t + b4) * t + b3) * t + b2) * t + b1) * t
    n = 1.0 - b * n
    return 1.0 - n if z < 0.0 else n


def bs_call_price(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """European call price; intrinsic value at or past expiry."""
    if S <= 0 or K <= 0:
        raise ValidationError(
            f"spot and strike must be positive, got S={S}, K={K}"
        )
    if T <= EXPIRY_EPSILON:
        return max(S - K, 0.0)
    if sigma == 0:
        # Limit of the closed form as sigma -> 0
        return math.exp(-r * T) * max(S - K, 0.0)
    d1 = (math.log(S / K) + 0.5 * sigma**2 * T) / (sigma * math.sqrt(T))
    d2 = d1 - sigma * math.sqrt(T)
    return math.exp(-r * T) * (S * norm_cdf(d1) - K * norm_cdf(d2))
