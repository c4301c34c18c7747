"""Demo entrypoint posting a single record.

This module is a small manual integration harness that:

- Loads configuration from environment (`TD_API_KEY`, `TD_DEBUG`, ...).
- Posts one JSON record to the given database and table.
- Prints the outcome delivered to the callback.

It is **not** intended as production ingestion logic.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any

from config import load_config
from treasuredata import TreasureDataClient, TreasureDataHttpError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Post one record to the Treasure Data Postback API.")
    parser.add_argument("db", help="database name")
    parser.add_argument("table", help="table name")
    parser.add_argument("record", help='JSON object to post, e.g. \'{"event": "signup"}\'')
    parser.add_argument("--debug", action="store_true", help="log request/response lifecycle events")
    args = parser.parse_args(argv)
    try:
        args.record = json.loads(args.record)
    except ValueError as exc:
        parser.error(f"record is not valid JSON: {exc}")
    if not isinstance(args.record, dict):
        parser.error("record must be a JSON object")
    return args


async def run_demo(args: argparse.Namespace, client: TreasureDataClient | None = None) -> int:
    """Send the record and return a process exit code (0 on success)."""
    if client is None:
        client = TreasureDataClient.from_config(load_config().treasuredata)
    if args.debug:
        client.set_debug(True)

    def _on_complete(error: TreasureDataHttpError | None, data: dict[str, Any]) -> None:
        if error is None:
            print(f"[ok] {args.db}.{args.table}: {data}")
        else:
            print(f"[error] HTTP {error.http_status}: {error.http_response}")

    error = await client.send_data(args.db, args.table, args.record, _on_complete)
    await client.aclose()
    return 0 if error is None else 1


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for running the demo with `python src/main.py`."""
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(message)s")
    return asyncio.run(run_demo(parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
