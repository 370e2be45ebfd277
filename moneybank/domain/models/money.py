"""Money value bound to the bank that created it.

Amounts are stored as an integer count of the currency's minor unit (cents for
USD, yen for JPY) and every arithmetic operation stays on integers. Values are
only combinable when they come from the same bank, so that two amounts are
never mixed across different exchange rate snapshots.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import TYPE_CHECKING

from moneybank.domain.exceptions.currency import CrossBankError, InvalidArgumentError
from moneybank.utils.rounding import round_half_away_from_zero

if TYPE_CHECKING:
    from moneybank.application.services.bank import Bank


@dataclass(frozen=True, eq=False)
class Money:
    cents: int
    currency: str
    bank: Bank = field(repr=False)

    def exchange_to(self, currency: str) -> Money:
        """Convert to `currency` using the bank exchange rates table.

        Raises UnsupportedExchangeError when the bank has no direct rate from
        this money's currency to `currency`.
        """
        if self.currency == currency:
            return self.bank.new_money(self.cents, self.currency)
        rate = self.bank.get_exchange_rate(self.currency, currency)
        return self._exchange(currency, rate)

    def exchange_to_with_rate(self, currency: str, rate: float) -> Money:
        """Convert to `currency` with a caller supplied rate, bypassing the bank table."""
        if self.currency == currency:
            return self.bank.new_money(self.cents, self.currency)
        self.bank.get_currency(currency)
        return self._exchange(currency, rate)

    def equals(self, other: Money) -> bool:
        return self.cents == self._prepare_operation(other).cents

    def greater_than(self, other: Money) -> bool:
        return self.cents > self._prepare_operation(other).cents

    def greater_than_or_equal(self, other: Money) -> bool:
        return self.cents >= self._prepare_operation(other).cents

    def less_than(self, other: Money) -> bool:
        return self.cents < self._prepare_operation(other).cents

    def less_than_or_equal(self, other: Money) -> bool:
        return self.cents <= self._prepare_operation(other).cents

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_negative(self) -> bool:
        return self.cents < 0

    def is_positive(self) -> bool:
        return self.cents > 0

    def absolute(self) -> Money:
        return self.bank.new_money(abs(self.cents), self.currency)

    def add(self, other: Money) -> Money:
        """Sum in this money's currency; `other` is exchanged first if needed."""
        exchanged = self._prepare_operation(other)
        return self.bank.new_money(self.cents + exchanged.cents, self.currency)

    def subtract(self, other: Money) -> Money:
        exchanged = self._prepare_operation(other)
        return self.bank.new_money(self.cents - exchanged.cents, self.currency)

    def multiply(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise InvalidArgumentError(f'money can only be multiplied by an integer, got {factor!r}')
        return self.bank.new_money(self.cents * factor, self.currency)

    def split(self, parts: int) -> list[Money]:
        """Split into `parts` amounts whose sum is exactly this amount.

        The quotient is truncated toward zero and the leftover minor units are
        handed out one by one to the first parts, so parts listed first may
        receive one more unit (one less for negative amounts) than the others.
        """
        if isinstance(parts, bool) or not isinstance(parts, int):
            raise InvalidArgumentError(f'split must be an integer, got {parts!r}')
        if parts <= 0:
            raise InvalidArgumentError('split must be higher than zero')

        quotient = abs(self.cents) // parts
        cents = quotient if self.cents >= 0 else -quotient
        remainder = self.cents - cents * parts
        step = 1 if remainder > 0 else -1

        results = []
        for i in range(parts):
            extra = step if i < abs(remainder) else 0
            results.append(self.bank.new_money(cents + extra, self.currency))
        return results

    def amount(self) -> float:
        """Value in major units, for display and reporting only."""
        currency = self.bank.get_currency(self.currency)
        return self.cents / currency.subunit_to_unit

    def format(self) -> str:
        """Render the amount with the currency symbol, separators and decimal mark.

        123456 USD cents renders as '$1,234.56', -123456 EUR cents as '-€1.234,56'.
        """
        currency = self.bank.get_currency(self.currency)
        places = currency.decimal_places
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(str(abs(self.cents))) + places + 2)
            value = (Decimal(abs(self.cents)) / currency.subunit_to_unit).quantize(
                Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN
            )
        whole, _, fraction = f'{value:f}'.partition('.')

        text = f'{int(whole):,}'.replace(',', currency.thousands_separator)
        if fraction:
            text = f'{text}{currency.decimal_mark}{fraction}'

        if currency.symbol_first:
            text = f'{currency.symbol}{text}'
        else:
            text = f'{text}{currency.symbol}'

        if self.cents < 0 and value != 0:
            return f'-{text}'
        return text

    def __str__(self) -> str:
        return self.format()

    def _exchange(self, currency: str, rate: float) -> Money:
        from_currency = self.bank.get_currency(self.currency)
        to_currency = self.bank.get_currency(currency)
        fractional = self.cents / (from_currency.subunit_to_unit / to_currency.subunit_to_unit)
        return self.bank.new_money(round_half_away_from_zero(fractional * rate), currency)

    def _prepare_operation(self, other: Money) -> Money:
        if self.bank.session_id != other.bank.session_id:
            raise CrossBankError()
        return other.exchange_to(self.currency)
