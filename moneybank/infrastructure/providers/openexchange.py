from collections.abc import Iterable
from typing import Any

import httpx

from moneybank.domain.exceptions.currency import ProviderError
from moneybank.domain.models.exchange_rates import ExchangeRates
from moneybank.infrastructure.providers.base import ExchangeRateProvider


class OpenExchangeProvider(ExchangeRateProvider):
    BASE_URL = 'https://openexchangerates.org/api'

    def __init__(self, app_id: str, client: httpx.AsyncClient | None = None, timeout: int = 10):
        super().__init__(client=client, timeout=timeout)
        self.app_id = app_id

    @property
    def name(self) -> str:
        return 'openexchange'

    def _authenticate(self, params: dict[str, Any]) -> dict[str, Any]:
        params['app_id'] = self.app_id
        return params

    def _raise_for_api_error(self, data: dict[str, Any]) -> None:
        if 'error' in data:
            message = data.get('description', data.get('message', 'Unknown error'))
            raise ProviderError(f'OpenExchange API error: {message}')

    async def fetch_rates(self, base: str, symbols: Iterable[str] | None = None) -> ExchangeRates:
        params = {'base': base}
        if symbols:
            params['symbols'] = ','.join(symbols)
        data = await self._request('latest.json', params)
        return self._parse_rates(data.get('rates'), base)
