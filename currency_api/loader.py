import codecs
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import pydantic

from currency_api.types.currency import Currency

logger = logging.getLogger(__name__)

CurrencyList = pydantic.TypeAdapter(list[Currency])


class MalformedCurrencyEntry(ValueError):
    """Currency table file is not a list of {"code": ..., "name": ...} objects"""


def _describe(error: Mapping[str, Any]) -> str:
    loc = error["loc"]
    if not loc:
        if error["type"] == "list_type":
            return "expected a JSON array of {code, name} objects"
        return error["msg"]
    if len(loc) == 1:
        return f"entry {loc[0]}: {error['msg']}"
    field = ".".join(str(part) for part in loc[1:])
    return f"entry {loc[0]}, {field}: {error['msg']}"


def parse_currencies(raw: str | bytes) -> tuple[Currency, ...]:
    # hand-edited files often carry a UTF-8 BOM
    if isinstance(raw, bytes):
        raw = raw.removeprefix(codecs.BOM_UTF8)
    else:
        raw = raw.removeprefix("\ufeff")
    try:
        currencies = CurrencyList.validate_json(raw)
    except pydantic.ValidationError as e:
        raise MalformedCurrencyEntry("; ".join(_describe(err) for err in e.errors())) from e
    return tuple(currencies)


def load_currencies(path: Path) -> tuple[Currency, ...]:
    logger.info(f"Loading currencies from {path}")
    currencies = parse_currencies(path.read_bytes())
    logger.info(f"Loaded {len(currencies)} currencies")
    return currencies


def dump_currencies(currencies: Iterable[Currency]) -> bytes:
    return CurrencyList.dump_json(list(currencies), indent=4)
