# nosec B101


import pytest

from moneybank.domain.exceptions.currency import CacheError
from moneybank.domain.models.exchange_rates import serialize
from moneybank.infrastructure.cache.file_cache import ExchangeRatesTableFileCache


TABLE = {'EUR': {'USD': 1.154321, 'GBP': 0.86}, 'USD': {'EUR': 0.86702}}


@pytest.mark.asyncio
async def test_write_then_read(tmp_path):
    cache = ExchangeRatesTableFileCache(tmp_path / 'exchange-rates-table-cache')

    await cache.write(TABLE)

    assert await cache.read() == TABLE
    assert cache.file_path.read_bytes() == serialize(TABLE)


@pytest.mark.asyncio
async def test_write_replaces_previous_table(tmp_path):
    cache = ExchangeRatesTableFileCache(str(tmp_path / 'rates.bin'))

    await cache.write(TABLE)
    await cache.write({'GBP': {'EUR': 1.16}})

    assert await cache.read() == {'GBP': {'EUR': 1.16}}
    assert list(tmp_path.iterdir()) == [tmp_path / 'rates.bin']


@pytest.mark.asyncio
async def test_read_missing_file(tmp_path):
    cache = ExchangeRatesTableFileCache(tmp_path / 'missing.bin')

    with pytest.raises(CacheError) as exc_info:
        await cache.read()

    assert 'Failed to read exchange rates cache file' in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.asyncio
async def test_read_corrupted_file(tmp_path):
    path = tmp_path / 'rates.bin'
    path.write_bytes(b'garbage')

    with pytest.raises(CacheError) as exc_info:
        await ExchangeRatesTableFileCache(path).read()

    assert 'Corrupted exchange rates cache file' in str(exc_info.value)


@pytest.mark.asyncio
async def test_write_to_missing_directory(tmp_path):
    cache = ExchangeRatesTableFileCache(tmp_path / 'nope' / 'rates.bin')

    with pytest.raises(CacheError) as exc_info:
        await cache.write(TABLE)

    assert 'Failed to write exchange rates cache file' in str(exc_info.value)
