import math
from decimal import ROUND_HALF_UP, Decimal

from moneybank.domain.exceptions.currency import InvalidArgumentError


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero (1.5 -> 2, -1.5 -> -2)."""
    if not math.isfinite(value):
        raise InvalidArgumentError(f'cannot round non finite value {value!r}')
    # Decimal(float) is exact, so ties are only the values that really are ties.
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))
