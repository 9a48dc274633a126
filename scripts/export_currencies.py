# dump the built-in currency table as JSON, suitable for CURRENCIES_FILE

import argparse
from pathlib import Path

from currency_api.currencies import CURRENCIES
from currency_api.loader import dump_currencies

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("output_path")
    args = parser.parse_args()

    output = Path(args.output_path).resolve()
    output.write_bytes(dump_currencies(CURRENCIES))
    print(f"Wrote {len(CURRENCIES)} currencies to {output}")
