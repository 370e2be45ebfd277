import contextlib
from collections.abc import Iterable
from typing import Any

import httpx

from moneybank.domain.exceptions.currency import ProviderError
from moneybank.domain.models.exchange_rates import ExchangeRates
from moneybank.infrastructure.providers.base import ExchangeRateProvider


class CurrencyAPIProvider(ExchangeRateProvider):
    """currencyapi.com (formerly freecurrencyapi); authenticates with the `apikey` header."""

    BASE_URL = 'https://api.currencyapi.com/v3'

    def __init__(self, api_key: str, client: httpx.AsyncClient | None = None, timeout: int = 10):
        super().__init__(client=client, timeout=timeout, headers={'apikey': api_key})
        self.api_key = api_key

    @property
    def name(self) -> str:
        return 'currencyapi.com'

    def _raise_for_api_error(self, data: dict[str, Any]) -> None:
        if 'error' in data:
            message = data['error'].get('message', 'Unknown error')
            raise ProviderError(f'CurrencyAPI error: {message}')

    def _describe_http_error(self, response: httpx.Response) -> str:
        msg = None
        with contextlib.suppress(Exception):
            msg = response.json().get('message')
        return msg or response.text[:200]

    async def fetch_rates(self, base: str, symbols: Iterable[str] | None = None) -> ExchangeRates:
        params = {'base_currency': base}
        if symbols:
            params['currencies'] = ','.join(symbols)
        data = await self._request('latest', params)

        entries = data.get('data')
        if not isinstance(entries, dict):
            raise ProviderError(f'{self.name} returned no rates for {base}')
        try:
            raw_rates = {code: info['value'] for code, info in entries.items()}
        except (KeyError, TypeError) as e:
            raise ProviderError(f'Rate value missing in CurrencyAPI response for {base}') from e
        return self._parse_rates(raw_rates, base)
