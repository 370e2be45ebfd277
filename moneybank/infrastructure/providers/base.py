from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

import httpx

from moneybank.domain.exceptions.currency import ProviderError, ProviderUnavailableError
from moneybank.domain.models.exchange_rates import ExchangeRates


class ExchangeRateProvider(ABC):
    """A base class for HTTP rate providers, handling the common request and error logic."""

    BASE_URL: str

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: int = 10, headers: dict | None = None):
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={'accept': 'application/json', **(headers or {})},
        )

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def fetch_rates(self, base: str, symbols: Iterable[str] | None = None) -> ExchangeRates:
        """Rates from `base` to each of `symbols` (every known currency when None)."""
        ...

    def _authenticate(self, params: dict[str, Any]) -> dict[str, Any]:
        return params

    def _raise_for_api_error(self, data: dict[str, Any]) -> None:
        pass

    def _describe_http_error(self, response: httpx.Response) -> str:
        return response.text[:200]

    async def _request(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f'{self.BASE_URL}/{endpoint}'
        params = self._authenticate(dict(params or {}))

        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = f'{self.name} HTTP error {status}: {self._describe_http_error(e.response)}'
            if status >= 500 or status == 429:
                raise ProviderUnavailableError(message) from e
            raise ProviderError(message) from e
        except httpx.RequestError as e:
            raise ProviderUnavailableError(f'{self.name} request failed: {e.__class__.__name__}') from e
        except ValueError as e:
            raise ProviderError(f'{self.name} response parsing error: {str(e)}') from e

        if not isinstance(data, dict):
            raise ProviderError(f'{self.name} response parsing error: unexpected payload {data!r:.200}')
        self._raise_for_api_error(data)
        return data

    def _parse_rates(self, raw_rates: Any, base: str) -> ExchangeRates:
        if not isinstance(raw_rates, dict) or not raw_rates:
            raise ProviderError(f'{self.name} returned no rates for {base}')
        try:
            return {code: float(rate) for code, rate in raw_rates.items()}
        except (TypeError, ValueError) as e:
            raise ProviderError(f'{self.name} returned a malformed rate for {base}: {e}') from e

    async def close(self) -> None:
        await self._client.aclose()
