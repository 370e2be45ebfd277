from abc import ABC, abstractmethod

from moneybank.domain.models.exchange_rates import ExchangeRatesTable


class ExchangeRatesTableCache(ABC):
    """Persists the last exchange rates table so a bank can start without waiting on the network."""

    @abstractmethod
    async def read(self) -> ExchangeRatesTable:
        """Return the cached table; raise CacheError when nothing usable is cached."""
        ...

    @abstractmethod
    async def write(self, table: ExchangeRatesTable) -> None:
        """Store the whole table; raise CacheError on failure."""
        ...
