import json
from pathlib import Path

from currency_api.app import create_app

ROOT_DIR = Path(__file__).parent.parent
OPENAPI_JSON = ROOT_DIR / "openapi.json"

if __name__ == "__main__":
    app = create_app()
    openapi = app.openapi()
    OPENAPI_JSON.write_text(
        json.dumps(
            openapi,
            indent=4,
            sort_keys=False,
        )
    )
