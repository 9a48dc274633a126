import logging
from contextlib import asynccontextmanager
from typing import Sequence

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from currency_api.currencies import CURRENCIES, UnknownCurrency, get_currency, index_by_code
from currency_api.types.currency import Currency

logger = logging.getLogger(__name__)


def create_app(
    currencies: Sequence[Currency] = CURRENCIES,
    frontend_origins: list[str] | None = None,
) -> FastAPI:
    currencies = tuple(currencies)
    currencies_by_code = index_by_code(currencies)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info(f"Serving {len(currencies)} currencies: {', '.join(map(str, currencies))}")
        yield

    app = FastAPI(title="currency-api", lifespan=lifespan)

    if frontend_origins is not None:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=frontend_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.get("/")
    async def ping() -> dict[str, str]:
        return {"message": "Hi"}

    @app.get("/currencies")
    async def list_currencies() -> list[Currency]:
        return list(currencies)

    @app.get("/currencies/{code}")
    async def currency_by_code(code: str) -> Currency:
        try:
            return get_currency(code, currencies_by_code)
        except UnknownCurrency as e:
            raise HTTPException(status_code=404, detail=str(e))

    return app
