import logging
from datetime import timedelta

from redis.asyncio import Redis

from moneybank.application.services.bank import Bank
from moneybank.application.services.rates_fetcher import RatesTableFetcher
from moneybank.config.settings import Settings, get_settings
from moneybank.domain.models.currencies import ALL_CURRENCIES, describe
from moneybank.domain.models.currency import Currency
from moneybank.infrastructure.cache.base import ExchangeRatesTableCache
from moneybank.infrastructure.cache.file_cache import ExchangeRatesTableFileCache
from moneybank.infrastructure.cache.redis_cache import RedisRatesTableCache
from moneybank.infrastructure.persistence.repositories.exchange_rates import DatabaseRatesTableCache
from moneybank.infrastructure.providers import (
	CurrencyAPIProvider,
	ExchangeRateProvider,
	FixerIOProvider,
	OpenExchangeProvider,
)
from moneybank.monitoring.logger import setup_logging

logger = logging.getLogger(__name__)


class BankDependencies:
	"""Container for the resources a configured bank holds on to."""

	def __init__(self):
		self.bank: Bank | None = None
		self.db_cache: DatabaseRatesTableCache | None = None
		self.redis_client: Redis | None = None
		self.providers: list[ExchangeRateProvider] = []


deps = BankDependencies()


def build_providers(settings: Settings) -> list[ExchangeRateProvider]:
	"""Providers with a configured key, in fallback order."""
	providers: list[ExchangeRateProvider] = []
	if settings.FIXERIO_API_KEY:
		providers.append(FixerIOProvider(settings.FIXERIO_API_KEY, timeout=settings.PROVIDER_TIMEOUT))
	if settings.OPENEXCHANGE_APP_ID:
		providers.append(OpenExchangeProvider(settings.OPENEXCHANGE_APP_ID, timeout=settings.PROVIDER_TIMEOUT))
	if settings.CURRENCYAPI_API_KEY:
		providers.append(CurrencyAPIProvider(settings.CURRENCYAPI_API_KEY, timeout=settings.PROVIDER_TIMEOUT))
	return providers


def select_currencies(settings: Settings) -> list[Currency]:
	codes = settings.currency_codes
	if not codes:
		return list(ALL_CURRENCIES)
	return [describe(code) for code in codes]


async def build_cache(settings: Settings) -> ExchangeRatesTableCache | None:
	backend = settings.RATES_CACHE_BACKEND
	if backend == 'file':
		return ExchangeRatesTableFileCache(settings.RATES_CACHE_FILE)
	if backend == 'redis':
		deps.redis_client = Redis.from_url(settings.REDIS_URL)
		return RedisRatesTableCache(
			deps.redis_client,
			key=settings.RATES_CACHE_KEY,
			ttl=timedelta(seconds=settings.RATES_CACHE_TTL_SECONDS),
		)
	if backend == 'database':
		deps.db_cache = DatabaseRatesTableCache(settings.DATABASE_URL)
		await deps.db_cache.create_tables()
		return deps.db_cache
	return None


async def init_bank(settings: Settings | None = None, configure_logging: bool = True) -> Bank:
	"""Build the bank described by the settings and load its exchange rates.

	Without any provider key the bank is created without a fetch function and
	can only exchange between identical currencies.
	"""
	settings = settings or get_settings()
	if configure_logging:
		setup_logging(settings.LOG_DIRECTORY, settings.LOG_LEVEL)

	logger.info(f'Initializing {settings.APP_NAME} bank...')
	currencies = select_currencies(settings)
	deps.providers = build_providers(settings)

	if not deps.providers:
		logger.warning('No exchange rate provider configured, the bank will not exchange')
		deps.bank = Bank(currencies)
		return deps.bank

	fetcher = RatesTableFetcher(
		deps.providers,
		[currency.iso_code for currency in currencies],
		retry_attempts=settings.PROVIDER_RETRY_ATTEMPTS,
	)
	cache = await build_cache(settings)
	deps.bank = await Bank.create(currencies, fetcher, cache)
	logger.info(f'Bank ready with {len(currencies)} currencies')
	return deps.bank


async def cleanup() -> None:
	logger.info('Cleaning up bank dependencies...')

	if deps.bank:
		await deps.bank.wait_for_refresh()
	for provider in deps.providers:
		await provider.close()
	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.db_cache:
		await deps.db_cache.close()

	deps.bank = None
	deps.db_cache = None
	deps.redis_client = None
	deps.providers = []
	logger.info('Cleanup complete')
