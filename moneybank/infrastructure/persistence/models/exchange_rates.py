from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class ExchangeRatesDB(Base):
	"""One row per source currency; `rates` holds the JSON object of destination rates."""

	__tablename__ = 'exchange_rates'

	from_currency: Mapped[str] = mapped_column(String(5), primary_key=True)
	rates: Mapped[str] = mapped_column(Text, nullable=False)
	updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
