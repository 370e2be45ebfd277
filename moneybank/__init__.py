from moneybank.application.services.bank import Bank, FetchExchangeRatesTable
from moneybank.application.services.banks import (
	DEFAULT_BANK,
	new_money,
	new_money_from_amount,
	new_one_bank,
	new_provider_bank,
)
from moneybank.domain.exceptions.currency import (
	CacheError,
	CrossBankError,
	CurrencyException,
	InvalidArgumentError,
	ProviderError,
	ProviderUnavailableError,
	SourceFetchError,
	UnsupportedCurrencyError,
	UnsupportedExchangeError,
)
from moneybank.domain.models.currency import Currency
from moneybank.domain.models.exchange_rates import ExchangeRates, ExchangeRatesTable
from moneybank.domain.models.money import Money
from moneybank.infrastructure.cache.base import ExchangeRatesTableCache
from moneybank.infrastructure.cache.file_cache import ExchangeRatesTableFileCache

__version__ = '0.1.0'

__all__ = [
	'Bank',
	'FetchExchangeRatesTable',
	'DEFAULT_BANK',
	'new_money',
	'new_money_from_amount',
	'new_one_bank',
	'new_provider_bank',
	'CacheError',
	'CrossBankError',
	'CurrencyException',
	'InvalidArgumentError',
	'ProviderError',
	'ProviderUnavailableError',
	'SourceFetchError',
	'UnsupportedCurrencyError',
	'UnsupportedExchangeError',
	'Currency',
	'ExchangeRates',
	'ExchangeRatesTable',
	'Money',
	'ExchangeRatesTableCache',
	'ExchangeRatesTableFileCache',
]
