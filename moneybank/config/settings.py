from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Comma separated ISO codes; empty means every known currency
	BANK_CURRENCIES: str = ''

	# Exchange rates cache
	RATES_CACHE_BACKEND: Literal['none', 'file', 'redis', 'database'] = 'file'
	RATES_CACHE_FILE: str = './exchange_rates.bin'
	RATES_CACHE_KEY: str = 'moneybank:rates'
	RATES_CACHE_TTL_SECONDS: int = 24 * 60 * 60

	DATABASE_URL: str = 'sqlite+aiosqlite:///./moneybank.db'

	REDIS_URL: str = 'redis://localhost:6379'

	FIXERIO_API_KEY: str = ''
	OPENEXCHANGE_APP_ID: str = ''
	CURRENCYAPI_API_KEY: str = ''

	PROVIDER_TIMEOUT: int = 10
	PROVIDER_RETRY_ATTEMPTS: int = 3

	# Application
	APP_NAME: str = 'moneybank'
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = 'logs'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@property
	def currency_codes(self) -> list[str]:
		return [code.strip().upper() for code in self.BANK_CURRENCIES.split(',') if code.strip()]


@lru_cache
def get_settings() -> Settings:
	return Settings()
