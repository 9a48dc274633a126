import re
from typing import Annotated, Any

import pydantic

CODE_RE = re.compile(r"^[A-Z]+$")


def parse_code(v: Any) -> str:
    if not isinstance(v, str):
        raise ValueError("currency code must be a string")
    code = v.strip().upper()
    if not CODE_RE.match(code):
        raise ValueError(f"not a valid currency code: {v!r}")
    return code


def parse_name(v: Any) -> str:
    if not isinstance(v, str):
        raise ValueError("currency name must be a string")
    name = v.strip()
    if not name:
        raise ValueError("currency name must not be empty")
    return name


CurrencyCode = Annotated[str, pydantic.BeforeValidator(parse_code)]
CurrencyName = Annotated[str, pydantic.BeforeValidator(parse_name)]


class Currency(pydantic.BaseModel):
    """Currency code (uppercase, e.g. "USD") and its display name"""

    model_config = pydantic.ConfigDict(frozen=True)

    code: CurrencyCode
    name: CurrencyName

    def __str__(self) -> str:
        return self.code
