import asyncio
import logging
from pathlib import Path

from moneybank.domain.exceptions.currency import CacheError
from moneybank.domain.models.exchange_rates import ExchangeRatesTable, deserialize, serialize
from moneybank.infrastructure.cache.base import ExchangeRatesTableCache

logger = logging.getLogger(__name__)


class ExchangeRatesTableFileCache(ExchangeRatesTableCache):
    """Stores the whole exchange rates table as one binary file."""

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    async def read(self) -> ExchangeRatesTable:
        try:
            data = await asyncio.to_thread(self.file_path.read_bytes)
        except OSError as e:
            raise CacheError(f'Failed to read exchange rates cache file {self.file_path}: {e}') from e

        try:
            return deserialize(data)
        except ValueError as e:
            raise CacheError(f'Corrupted exchange rates cache file {self.file_path}: {e}') from e

    async def write(self, table: ExchangeRatesTable) -> None:
        data = serialize(table)
        try:
            await asyncio.to_thread(self._write_bytes, data)
        except OSError as e:
            raise CacheError(f'Failed to write exchange rates cache file {self.file_path}: {e}') from e
        logger.debug(f'Wrote {len(data)} bytes to {self.file_path}')

    def _write_bytes(self, data: bytes) -> None:
        # Written to a sibling file, then renamed over the target.
        tmp_path = self.file_path.with_name(f'{self.file_path.name}.tmp')
        tmp_path.write_bytes(data)
        tmp_path.replace(self.file_path)
