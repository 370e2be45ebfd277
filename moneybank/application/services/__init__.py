from .bank import Bank, FetchExchangeRatesTable
from .banks import DEFAULT_BANK, new_money, new_money_from_amount, new_one_bank, new_provider_bank, one_to_one_table
from .rates_fetcher import RatesTableFetcher

__all__ = [
	'Bank',
	'FetchExchangeRatesTable',
	'DEFAULT_BANK',
	'new_money',
	'new_money_from_amount',
	'new_one_bank',
	'new_provider_bank',
	'one_to_one_table',
	'RatesTableFetcher',
]
