import logging

from dotenv import load_dotenv

from currency_api.app import create_app

load_dotenv()
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)-10s%(asctime)s %(name)s: %(message)s",
)

app = create_app(
    frontend_origins=["http://127.0.0.1:5500"],
)
