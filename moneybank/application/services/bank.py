import asyncio
import inspect
import logging
import threading
import uuid
from collections.abc import Awaitable, Callable, Iterable, Mapping
from types import MappingProxyType

from moneybank.domain.exceptions.currency import (
    CacheError,
    InvalidArgumentError,
    UnsupportedCurrencyError,
    UnsupportedExchangeError,
)
from moneybank.domain.models.currency import Currency
from moneybank.domain.models.exchange_rates import ExchangeRatesTable, lookup
from moneybank.domain.models.money import Money
from moneybank.infrastructure.cache.base import ExchangeRatesTableCache
from moneybank.utils.rounding import round_half_away_from_zero

logger = logging.getLogger(__name__)

FetchExchangeRatesTable = Callable[[], Awaitable[ExchangeRatesTable] | ExchangeRatesTable]


class Bank:
    """Creates money and exchanges it between the currencies it supports.

    The bank owns a catalog of currencies and an exchange rates table. The
    table is filled by `fetch` (a zero-argument function, sync or async) and,
    when `cache` is given, seeded from the cache first while a background task
    refreshes it from `fetch`.

    Without `fetch` the bank can still create and format money, but every
    exchange between different currencies fails with UnsupportedExchangeError.
    """

    def __init__(
        self,
        currencies: Iterable[Currency],
        fetch: FetchExchangeRatesTable | None = None,
        cache: ExchangeRatesTableCache | None = None,
    ):
        catalog: dict[str, Currency] = {}
        for currency in currencies:
            if currency.iso_code in catalog:
                raise InvalidArgumentError(f'Currency {currency.iso_code} is listed more than once')
            catalog[currency.iso_code] = currency

        self.currencies: Mapping[str, Currency] = MappingProxyType(catalog)
        self.session_id = uuid.uuid4().hex
        self._fetch = fetch
        self._cache = cache

        # Published tables are never mutated: writers build a copy and swap the reference.
        self._rates: ExchangeRatesTable = {code: {} for code in catalog}
        self._write_lock = threading.Lock()
        self._refresh_tasks: set[asyncio.Task] = set()

    @classmethod
    async def create(
        cls,
        currencies: Iterable[Currency],
        fetch: FetchExchangeRatesTable | None = None,
        cache: ExchangeRatesTableCache | None = None,
    ) -> 'Bank':
        """Build a bank and load its exchange rates table.

        Raises whatever `fetch` raises when the table has to be fetched
        synchronously (no cache, or an unreadable one).
        """
        bank = cls(currencies, fetch, cache)
        await bank.update_exchange_rates_table()
        return bank

    @classmethod
    async def from_static_table(cls, currencies: Iterable[Currency], table: ExchangeRatesTable | None) -> 'Bank':
        return await cls.create(currencies, lambda: table or {})

    @property
    def exchange_rates_table(self) -> ExchangeRatesTable:
        rates = self._rates
        return {code: dict(row) for code, row in rates.items()}

    @property
    def has_pending_refresh(self) -> bool:
        return bool(self._refresh_tasks)

    def get_currency(self, code: str) -> Currency:
        try:
            return self.currencies[code]
        except KeyError:
            raise UnsupportedCurrencyError(code) from None

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        if from_currency == to_currency:
            return 1.0
        rate = lookup(self._rates, from_currency, to_currency)
        if rate is None:
            raise UnsupportedExchangeError(from_currency, to_currency)
        return rate

    def new_money(self, cents: int, currency: str) -> Money:
        """Create money from an amount in the currency minor unit (100 means $1.00 for USD)."""
        self.get_currency(currency)
        if isinstance(cents, bool) or not isinstance(cents, int):
            raise InvalidArgumentError(f'cents must be an integer, got {cents!r}')
        return Money(cents=cents, currency=currency, bank=self)

    def new_money_from_amount(self, amount: float, currency: str) -> Money:
        """Create money from an amount in major units, rounding half away from zero."""
        details = self.get_currency(currency)
        cents = round_half_away_from_zero(amount * details.subunit_to_unit)
        return Money(cents=cents, currency=currency, bank=self)

    async def update_exchange_rates_table(self) -> None:
        """Refresh the table from the fetch function.

        With a cache, the cached table is installed right away and the fetch
        runs in a background task whose errors are only logged. Without a
        cache, or when the cache cannot be read, the fetch runs inline and its
        errors propagate.
        """
        if self._fetch is None:
            return

        if self._cache is None:
            await self._blocking_update()
            return

        try:
            table = await self._cache.read()
        except Exception as e:
            logger.warning(f'Exchange rates cache unavailable, fetching synchronously: {e}')
            await self._blocking_update()
            return

        await self.install_table(table, persist=False)
        logger.info('Exchange rates table loaded from cache, refreshing in background')
        self._start_background_refresh()

    async def install_table(self, table: ExchangeRatesTable, persist: bool = True) -> None:
        """Merge `table` into the live table and, with `persist`, write it to the cache.

        Rows and rates for currencies outside the catalog are dropped, and
        pairs missing from `table` keep their previous rate. Cache write
        failures are logged, not raised.
        """
        self._merge_table(table)
        if self._cache is None or not persist:
            return
        try:
            await self._cache.write(table)
        except CacheError as e:
            logger.error(f'Failed to write exchange rates table to cache: {e}')

    async def wait_for_refresh(self) -> None:
        """Wait for background refreshes started so far."""
        while self._refresh_tasks:
            await asyncio.gather(*self._refresh_tasks, return_exceptions=True)

    def _merge_table(self, table: ExchangeRatesTable) -> None:
        with self._write_lock:
            merged = {code: dict(row) for code, row in self._rates.items()}
            for from_currency, rates in table.items():
                if from_currency not in self.currencies:
                    continue
                row = merged[from_currency]
                for to_currency, rate in rates.items():
                    if to_currency == from_currency or to_currency not in self.currencies:
                        continue
                    row[to_currency] = float(rate)
            self._rates = merged
        logger.info(f'Exchange rates table installed for {len(table)} source currencies')

    async def _fetch_table(self) -> ExchangeRatesTable:
        if _is_async_callable(self._fetch):
            table = await self._fetch()
        else:
            # Plain functions run in a worker thread.
            table = await asyncio.to_thread(self._fetch)
        if inspect.isawaitable(table):
            table = await table
        return table or {}

    async def _blocking_update(self) -> None:
        table = await self._fetch_table()
        await self.install_table(table)

    def _start_background_refresh(self) -> None:
        task = asyncio.create_task(self._background_update())
        self._refresh_tasks.add(task)
        task.add_done_callback(self._refresh_tasks.discard)

    async def _background_update(self) -> None:
        try:
            await self._blocking_update()
        except Exception as e:
            logger.error(f'Background exchange rates refresh failed: {e}', exc_info=True)


def _is_async_callable(obj) -> bool:
    return inspect.iscoroutinefunction(obj) or inspect.iscoroutinefunction(getattr(obj, '__call__', None))
