# nosec B101


import pytest

from moneybank.domain.exceptions.currency import InvalidArgumentError
from moneybank.utils.rounding import round_half_away_from_zero


@pytest.mark.parametrize(
    'value, expected',
    [
        (1.5, 2),
        (-1.5, -2),
        (2.5, 3),
        (-2.5, -3),
        (0.5, 1),
        (-0.5, -1),
        (1.4999, 1),
        (123.96, 124),
        (86.702, 87),
        (0.0, 0),
    ],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_round_returns_int():
    assert isinstance(round_half_away_from_zero(150.2), int)


@pytest.mark.parametrize('value', [float('nan'), float('inf'), float('-inf')])
def test_round_non_finite_raises(value):
    with pytest.raises(InvalidArgumentError):
        round_half_away_from_zero(value)
