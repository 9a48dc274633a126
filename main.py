import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from currency_api.app import create_app
from currency_api.currencies import CURRENCIES
from currency_api.loader import load_currencies

load_dotenv()
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)-10s%(asctime)s %(name)s: %(message)s",
)


def parse_origins(value: str | None) -> list[str] | None:
    if not value:
        return None
    origins = [o.strip() for o in value.split(",") if o.strip()]
    return origins or None


currencies_file = os.environ.get("CURRENCIES_FILE")

app = create_app(
    currencies=load_currencies(Path(currencies_file)) if currencies_file else CURRENCIES,
    frontend_origins=parse_origins(os.environ.get("FRONTEND_ORIGINS")),
)
