from collections.abc import Iterable
from typing import Any

import httpx

from moneybank.domain.exceptions.currency import ProviderError
from moneybank.domain.models.exchange_rates import ExchangeRates
from moneybank.infrastructure.providers.base import ExchangeRateProvider


class FixerIOProvider(ExchangeRateProvider):
    BASE_URL = 'http://data.fixer.io/api'

    def __init__(self, api_key: str, client: httpx.AsyncClient | None = None, timeout: int = 10):
        super().__init__(client=client, timeout=timeout)
        self.api_key = api_key

    @property
    def name(self) -> str:
        return 'fixerio'

    def _authenticate(self, params: dict[str, Any]) -> dict[str, Any]:
        params['access_key'] = self.api_key
        return params

    def _raise_for_api_error(self, data: dict[str, Any]) -> None:
        if not data.get('success', False):
            info = data.get('error', {}).get('info', 'Unknown error')
            raise ProviderError(f'Fixer.io API error: {info}')

    async def fetch_rates(self, base: str, symbols: Iterable[str] | None = None) -> ExchangeRates:
        params = {'base': base}
        if symbols:
            params['symbols'] = ','.join(symbols)
        data = await self._request('latest', params)
        return self._parse_rates(data.get('rates'), base)
