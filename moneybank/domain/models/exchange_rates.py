"""Exchange rates table and its binary encoding.

A table maps a source currency code to the rates towards destination codes:

    table = {
        'USD': {'EUR': 0.87, 'GBP': 0.74},
        'EUR': {'USD': 1.16, 'GBP': 0.86},
    }

One unit of 'USD' is worth ``table['USD']['EUR']`` units of 'EUR'. The table is
not required to be symmetric or transitive, and a rate of 0.0 means "no route".
"""
import json
import struct

ExchangeRates = dict[str, float]
ExchangeRatesTable = dict[str, ExchangeRates]

_MAGIC = b'XRT'
_VERSION = 1
_HEADER = struct.Struct('>3sB')
_COUNT = struct.Struct('>I')
_CODE_LENGTH = struct.Struct('>H')
_RATE = struct.Struct('>d')


def lookup(table: ExchangeRatesTable, from_currency: str, to_currency: str) -> float | None:
    rate = table.get(from_currency, {}).get(to_currency, 0.0)
    if rate == 0.0:
        return None
    return rate


def serialize(table: ExchangeRatesTable) -> bytes:
    chunks = [_HEADER.pack(_MAGIC, _VERSION), _COUNT.pack(len(table))]
    for from_currency, rates in table.items():
        chunks.append(_pack_code(from_currency))
        chunks.append(_COUNT.pack(len(rates)))
        for to_currency, rate in rates.items():
            chunks.append(_pack_code(to_currency))
            chunks.append(_RATE.pack(float(rate)))
    return b''.join(chunks)


def deserialize(data: bytes) -> ExchangeRatesTable:
    reader = _Reader(data)
    try:
        magic, version = reader.unpack(_HEADER)
        if magic != _MAGIC:
            raise ValueError('Invalid exchange rates table data: bad magic header')
        if version != _VERSION:
            raise ValueError(f'Unsupported exchange rates table version: {version}')

        table: ExchangeRatesTable = {}
        (row_count,) = reader.unpack(_COUNT)
        for _ in range(row_count):
            from_currency = reader.code()
            (entry_count,) = reader.unpack(_COUNT)
            rates: ExchangeRates = {}
            for _ in range(entry_count):
                to_currency = reader.code()
                (rate,) = reader.unpack(_RATE)
                rates[to_currency] = rate
            table[from_currency] = rates
    except (struct.error, UnicodeDecodeError) as e:
        raise ValueError(f'Invalid exchange rates table data: {e}') from e

    if not reader.exhausted:
        raise ValueError('Invalid exchange rates table data: trailing bytes')
    return table


def to_json(rates: ExchangeRates) -> str:
    return json.dumps(rates, sort_keys=True)


def from_json(value: str | bytes) -> ExchangeRates:
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f'Failed to unmarshal exchange rates JSON value: {value!r}') from e
    if not isinstance(data, dict):
        raise ValueError(f'Failed to unmarshal exchange rates JSON value: {value!r}')
    try:
        return {code: float(rate) for code, rate in data.items()}
    except (TypeError, ValueError) as e:
        raise ValueError(f'Failed to unmarshal exchange rates JSON value: {value!r}') from e


def _pack_code(code: str) -> bytes:
    encoded = code.encode('utf-8')
    return _CODE_LENGTH.pack(len(encoded)) + encoded


class _Reader:
    def __init__(self, data: bytes):
        self._view = memoryview(data)
        self._offset = 0

    @property
    def exhausted(self) -> bool:
        return self._offset == len(self._view)

    def unpack(self, fmt: struct.Struct) -> tuple:
        values = fmt.unpack_from(self._view, self._offset)
        self._offset += fmt.size
        return values

    def code(self) -> str:
        (length,) = self.unpack(_CODE_LENGTH)
        raw = self._view[self._offset:self._offset + length]
        if len(raw) != length:
            raise struct.error('unexpected end of data while reading a currency code')
        self._offset += length
        return bytes(raw).decode('utf-8')
