import math
from dataclasses import dataclass

from moneybank.domain.exceptions.currency import InvalidArgumentError


@dataclass(frozen=True)
class Currency:
    name: str
    iso_code: str
    symbol: str
    symbol_first: bool
    subunit_to_unit: int  # 100 for cents, 1 when there is no subunit
    thousands_separator: str
    decimal_mark: str

    def __post_init__(self):
        if isinstance(self.subunit_to_unit, bool) or not isinstance(self.subunit_to_unit, int):
            raise InvalidArgumentError(
                f'subunit_to_unit of {self.iso_code} must be an integer, got {self.subunit_to_unit!r}'
            )
        if self.subunit_to_unit <= 0:
            raise InvalidArgumentError(
                f'subunit_to_unit of {self.iso_code} must be positive, got {self.subunit_to_unit}'
            )

    @property
    def decimal_places(self) -> int:
        return int(math.log10(self.subunit_to_unit))
