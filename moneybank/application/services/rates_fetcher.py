import asyncio
import logging
from collections.abc import Iterable, Sequence

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from moneybank.domain.exceptions.currency import InvalidArgumentError, ProviderError, ProviderUnavailableError
from moneybank.domain.models.exchange_rates import ExchangeRates, ExchangeRatesTable
from moneybank.infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RatesTableFetcher:
    """Builds a full exchange rates table by asking providers for every base currency.

    Providers are tried in order for each base. A provider failing with
    ProviderUnavailableError is retried before falling back to the next one.
    """

    def __init__(
        self,
        providers: Sequence[ExchangeRateProvider],
        currencies: Iterable[str],
        retry_attempts: int = 3,
        wait: wait_base | None = None,
    ):
        if not providers:
            raise InvalidArgumentError('At least one exchange rate provider is required')
        if retry_attempts < 1:
            raise InvalidArgumentError('retry_attempts must be at least 1')

        self.providers = list(providers)
        self.currencies = list(dict.fromkeys(currencies))
        self.retry_attempts = retry_attempts
        self.wait = wait or wait_exponential(multiplier=1, min=1, max=10)

    async def __call__(self) -> ExchangeRatesTable:
        rows = await asyncio.gather(*(self.fetch_base(base) for base in self.currencies))
        return dict(zip(self.currencies, rows, strict=True))

    async def fetch_base(self, base: str) -> ExchangeRates:
        symbols = [code for code in self.currencies if code != base]

        for provider in self.providers:
            try:
                rates = await self._fetch_with_retry(provider, base, symbols)
            except ProviderError as e:
                logger.warning(f'Provider {provider.name} failed for {base}: {e}')
                continue
            logger.debug(f'Fetched {len(rates)} rates for {base} from {provider.name}')
            return rates

        logger.error(f'All providers failed for base currency {base}')
        raise ProviderError(f'All providers failed for base currency {base}')

    async def _fetch_with_retry(
        self, provider: ExchangeRateProvider, base: str, symbols: list[str]
    ) -> ExchangeRates:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=self.wait,
            retry=retry_if_exception_type(ProviderUnavailableError),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await provider.fetch_rates(base, symbols)
        raise ProviderError(f'{provider.name} returned no result for {base}')

    async def close(self) -> None:
        for provider in self.providers:
            await provider.close()
