"""Chart labels for the quarter grid ("Feb 26", "May 26", ...)."""

from datetime import date

import pandas as pd


def quarter_labels(steps: int, start: date | None = None) -> tuple[str, ...]:
    """Label for t=0 plus one per quarter, each 3 calendar months apart."""
    start_ts = pd.Timestamp(start if start is not None else date.today())
    return tuple(
        (start_ts + pd.DateOffset(months=3 * q)).strftime("%b %y")
        for q in range(steps + 1)
    )
