from contextlib import asynccontextmanager
from datetime import UTC, datetime

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.future import select

from moneybank.domain.exceptions.currency import CacheError
from moneybank.domain.models.exchange_rates import ExchangeRatesTable, from_json, to_json
from moneybank.infrastructure.cache.base import ExchangeRatesTableCache
from moneybank.infrastructure.persistence.models.exchange_rates import Base, ExchangeRatesDB


class DatabaseRatesTableCache(ExchangeRatesTableCache):
	"""Keeps the exchange rates table in the `exchange_rates` SQL table, one row per source currency."""

	def __init__(self, db_url: str):
		self.engine = create_async_engine(db_url)
		self.session_factory = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

	async def create_tables(self) -> None:
		async with self.engine.begin() as conn:
			await conn.run_sync(Base.metadata.create_all)

	async def close(self) -> None:
		await self.engine.dispose()

	async def read(self) -> ExchangeRatesTable:
		try:
			async with self.session_factory() as session:
				result = await session.execute(select(ExchangeRatesDB))
				rows = result.scalars().all()
		except SQLAlchemyError as e:
			raise CacheError(f'Failed to load exchange rates from database: {e}') from e

		if not rows:
			raise CacheError('No exchange rates table stored in database')

		try:
			return {row.from_currency: from_json(row.rates) for row in rows}
		except ValueError as e:
			raise CacheError(str(e)) from e

	async def write(self, table: ExchangeRatesTable) -> None:
		now = datetime.now(UTC)
		rows = [ExchangeRatesDB(from_currency=code, rates=to_json(rates), updated_at=now) for code, rates in table.items()]
		try:
			async with self._replace_all() as session:
				session.add_all(rows)
		except SQLAlchemyError as e:
			raise CacheError(f'Failed to store exchange rates in database: {e}') from e

	@asynccontextmanager
	async def _replace_all(self):
		"""Transaction that starts by emptying the table; readers see either the old rows or the new ones."""
		async with self.session_factory() as session:
			async with session.begin():
				await session.execute(delete(ExchangeRatesDB))
				yield session
