from currency_api.types.currency import Currency, CurrencyCode

__all__ = ["Currency", "CurrencyCode"]
