# nosec B101


import pytest

from moneybank.domain.exceptions.currency import InvalidArgumentError, UnsupportedCurrencyError
from moneybank.domain.models.currencies import ALL_CURRENCIES, CURRENCIES_BY_CODE, EUR, JPY, USD, describe
from moneybank.domain.models.currency import Currency


def test_catalog_has_every_known_currency_once():
    codes = [c.iso_code for c in ALL_CURRENCIES]

    assert len(ALL_CURRENCIES) == 182
    assert len(set(codes)) == len(codes)
    assert set(CURRENCIES_BY_CODE) == set(codes)


def test_catalog_formatting_data():
    assert USD.symbol == '$'
    assert USD.symbol_first is True
    assert USD.subunit_to_unit == 100
    assert (USD.thousands_separator, USD.decimal_mark) == (',', '.')
    assert (EUR.thousands_separator, EUR.decimal_mark) == ('.', ',')
    assert JPY.subunit_to_unit == 1


def test_describe_known_code():
    assert describe('EUR') is EUR


def test_describe_unknown_code_raises():
    with pytest.raises(UnsupportedCurrencyError) as exc_info:
        describe('XLN')

    assert str(exc_info.value) == 'bank does not support XLN currency'
    assert exc_info.value.currency == 'XLN'


@pytest.mark.parametrize('code, places', [('USD', 2), ('JPY', 0), ('KWD', 3), ('BTC', 8), ('MGA', 0)])
def test_decimal_places(code, places):
    assert describe(code).decimal_places == places


@pytest.mark.parametrize('subunit', [0, -100, 1.5, True])
def test_invalid_subunit_rejected(subunit):
    with pytest.raises(InvalidArgumentError):
        Currency('Test', 'TST', 'T', True, subunit, ',', '.')


def test_currency_is_immutable():
    with pytest.raises(AttributeError):
        USD.symbol = 'US$'
