import codecs
import json
from pathlib import Path

import pytest

from currency_api.currencies import CURRENCIES
from currency_api.loader import (
    MalformedCurrencyEntry,
    dump_currencies,
    load_currencies,
    parse_currencies,
)
from currency_api.types.currency import Currency


def test_load_currencies(tmp_path: Path) -> None:
    path = tmp_path / "currencies.json"
    path.write_text(
        json.dumps(
            [
                {"code": "ARS", "name": "Peso Argentino"},
                {"code": "usd", "name": "Dólar de Estados Unidos"},
            ]
        ),
        encoding="utf-8",
    )
    assert load_currencies(path) == (
        Currency(code="ARS", name="Peso Argentino"),
        Currency(code="USD", name="Dólar de Estados Unidos"),
    )


def test_builtin_table_export(tmp_path: Path) -> None:
    path = tmp_path / "currencies.json"
    path.write_bytes(dump_currencies(CURRENCIES))
    assert json.loads(path.read_text(encoding="utf-8"))[0] == {
        "code": "USD",
        "name": "Dólar de Estados Unidos",
    }
    assert load_currencies(path) == CURRENCIES


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_currencies(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "raw, message_part",
    [
        pytest.param('[{"code": "EUR"}]', "entry 0, name", id="missing name"),
        pytest.param(
            '[{"code": "EUR", "name": "Euro"}, {"code": "", "name": "Libra"}]',
            "entry 1, code",
            id="empty code",
        ),
        pytest.param('[{"code": "EUR", "name": ""}]', "entry 0, name", id="empty name"),
        pytest.param('["EUR"]', "entry 0", id="entry is not an object"),
        pytest.param(
            '{"code": "EUR", "name": "Euro"}',
            "expected a JSON array of {code, name} objects",
            id="not a list",
        ),
        pytest.param("not json", "JSON", id="invalid json"),
    ],
)
def test_malformed_entries(raw: str, message_part: str) -> None:
    with pytest.raises(MalformedCurrencyEntry) as exc_info:
        parse_currencies(raw)
    assert message_part in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_load_currencies_with_bom(tmp_path: Path) -> None:
    path = tmp_path / "currencies.json"
    path.write_bytes(codecs.BOM_UTF8 + dump_currencies(CURRENCIES))
    assert load_currencies(path) == CURRENCIES
    assert parse_currencies('\ufeff[{"code": "EUR", "name": "Euro"}]') == (
        Currency(code="EUR", name="Euro"),
    )
