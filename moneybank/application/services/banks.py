"""Ready made banks and the package level money helpers."""
from collections.abc import Iterable, Sequence

from moneybank.application.services.bank import Bank
from moneybank.application.services.rates_fetcher import RatesTableFetcher
from moneybank.domain.models.currencies import ALL_CURRENCIES
from moneybank.domain.models.currency import Currency
from moneybank.domain.models.exchange_rates import ExchangeRatesTable
from moneybank.domain.models.money import Money
from moneybank.infrastructure.cache.base import ExchangeRatesTableCache
from moneybank.infrastructure.providers.base import ExchangeRateProvider

# Knows every currency but has no rates, so it cannot exchange.
DEFAULT_BANK = Bank(ALL_CURRENCIES)


def new_money(cents: int, currency: str) -> Money:
    return DEFAULT_BANK.new_money(cents, currency)


def new_money_from_amount(amount: float, currency: str) -> Money:
    return DEFAULT_BANK.new_money_from_amount(amount, currency)


def one_to_one_table(currencies: Iterable[Currency]) -> ExchangeRatesTable:
    """Rates under which an amount keeps its count of minor units in every currency."""
    currencies = list(currencies)
    return {
        source.iso_code: {
            target.iso_code: source.subunit_to_unit / target.subunit_to_unit
            for target in currencies
            if target.iso_code != source.iso_code
        }
        for source in currencies
    }


async def new_one_bank(currencies: Iterable[Currency] = ALL_CURRENCIES) -> Bank:
    currencies = list(currencies)
    return await Bank.from_static_table(currencies, one_to_one_table(currencies))


async def new_provider_bank(
    currencies: Iterable[Currency],
    providers: Sequence[ExchangeRateProvider],
    cache: ExchangeRatesTableCache | None = None,
    retry_attempts: int = 3,
) -> Bank:
    """Bank fed by HTTP providers, with an optional cache to start from."""
    currencies = list(currencies)
    fetcher = RatesTableFetcher(providers, [c.iso_code for c in currencies], retry_attempts=retry_attempts)
    return await Bank.create(currencies, fetcher, cache)
