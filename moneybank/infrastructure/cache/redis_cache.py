from datetime import timedelta

from redis import asyncio as redis
from redis.exceptions import RedisError

from moneybank.domain.exceptions.currency import CacheError
from moneybank.domain.models.exchange_rates import ExchangeRatesTable, deserialize, serialize
from moneybank.infrastructure.cache.base import ExchangeRatesTableCache


class RedisRatesTableCache(ExchangeRatesTableCache):
    def __init__(self, redis_client: redis.Redis, key: str = 'rates:table', ttl: timedelta = timedelta(hours=24)):
        self.redis = redis_client
        self.key = key
        self.ttl = ttl

    async def read(self) -> ExchangeRatesTable:
        try:
            data = await self.redis.get(self.key)
        except RedisError as e:
            raise CacheError(f'Redis read failed for {self.key}: {e}') from e

        if not data:
            raise CacheError(f'No exchange rates table cached under {self.key}')

        try:
            return deserialize(data)
        except ValueError as e:
            raise CacheError(f'Corrupted exchange rates table under {self.key}: {e}') from e

    async def write(self, table: ExchangeRatesTable) -> None:
        try:
            await self.redis.setex(self.key, self.ttl, serialize(table))
        except RedisError as e:
            raise CacheError(f'Redis write failed for {self.key}: {e}') from e
