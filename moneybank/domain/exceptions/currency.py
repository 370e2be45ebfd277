class CurrencyException(Exception):
    pass


class UnsupportedCurrencyError(CurrencyException):
    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f'bank does not support {currency} currency')


class UnsupportedExchangeError(CurrencyException):
    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f'bank does not support exchange from {from_currency} to {to_currency}')


class CrossBankError(CurrencyException):
    def __init__(self):
        super().__init__(
            'currencies have different banks: operation between currencies '
            'can be done only between currencies of the same bank'
        )


class InvalidArgumentError(CurrencyException, ValueError):
    pass


class SourceFetchError(CurrencyException):
    pass


class ProviderError(SourceFetchError):
    pass


class ProviderUnavailableError(ProviderError):
    """Transport failure or 5xx answer; worth retrying."""


class CacheError(CurrencyException):
    pass
