from types import MappingProxyType
from typing import Iterable, Mapping

from currency_api.types.currency import Currency

# presentation order, not sorted
CURRENCIES: tuple[Currency, ...] = (
    Currency(code="USD", name="Dólar de Estados Unidos"),
    Currency(code="MXN", name="Peso Mexicano"),
    Currency(code="EUR", name="Euro"),
    Currency(code="GBP", name="Libra Esterlina"),
)


class UnknownCurrency(KeyError):
    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown currency: {self.code}"


def index_by_code(currencies: Iterable[Currency]) -> Mapping[str, Currency]:
    index: dict[str, Currency] = {}
    for c in currencies:
        index.setdefault(c.code, c)  # first occurrence wins
    return MappingProxyType(index)


CURRENCIES_BY_CODE = index_by_code(CURRENCIES)


def get_currency(code: str, index: Mapping[str, Currency] = CURRENCIES_BY_CODE) -> Currency:
    normalized = code.strip().upper()
    try:
        return index[normalized]
    except KeyError:
        raise UnknownCurrency(normalized) from None
