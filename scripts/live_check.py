"""Manual live check against the EskomSePush API.

Run from the repository root with:
  ESP_TOKEN=... PYTHONPATH=src python scripts/live_check.py

Use the bundled offline fixtures instead (no token, no quota used):
  PYTHONPATH=src python scripts/live_check.py --offline

Select operations with --operation (repeatable), for example:
  ESP_TOKEN=... PYTHONPATH=src python scripts/live_check.py \
    --operation area_information --area-id jhbcitypower2-11-constantiakloof --test current

Optional environment variables:
  ESP_TOKEN
  ESP_BASE_URL

Every live operation except check_allowance and test-mode area_information
counts against the token quota.
Debug helpers:
  --debug enables library debug logging on stderr.
  --traceback prints full tracebacks on errors.
  --sanitize-output masks user-submitted text in the printed results.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import os
import sys
import traceback
from typing import Any

from sanitize import mask_token as _mask_token
from sanitize import sanitize_data as _sanitize_data

from pyeskomsepush import EskomSePush
from pyeskomsepush.exceptions import PyEskomSePushError

_LOGGER = logging.getLogger(__name__)
_OPERATIONS = (
    "check_allowance",
    "status",
    "areas_search",
    "areas_nearby",
    "topics_nearby",
    "area_information",
)
_DEFAULT_AREA_ID = "jhbcitypower2-11-constantiakloof"
_DEFAULT_TEXT = "constantia kloof"
_DEFAULT_LATITUDE = -26.0269658
_DEFAULT_LONGITUDE = 28.0137339


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run EskomSePush API operations.")
    parser.add_argument("--token", default=os.environ.get("ESP_TOKEN"))
    parser.add_argument("--base-url", default=os.environ.get("ESP_BASE_URL"))
    parser.add_argument("--offline", action="store_true", help="Use bundled fixtures.")
    parser.add_argument(
        "--operation",
        dest="operations",
        action="append",
        choices=_OPERATIONS,
        help="Operation to run (default: all).",
    )
    parser.add_argument("--area-id", default=_DEFAULT_AREA_ID)
    parser.add_argument("--test", choices=("current", "future"), default=None)
    parser.add_argument("--text", default=_DEFAULT_TEXT)
    parser.add_argument("--lat", type=float, default=_DEFAULT_LATITUDE)
    parser.add_argument("--lon", type=float, default=_DEFAULT_LONGITUDE)
    parser.add_argument("--lenient-timestamps", action="store_true")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--traceback", action="store_true")
    parser.add_argument("--sanitize-output", action="store_true")
    return parser.parse_args()


def _to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _to_jsonable(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


async def _run_operation(client: EskomSePush, name: str, args: argparse.Namespace) -> Any:
    if name == "status":
        return await client.status()
    if name == "area_information":
        return await client.area_information(args.area_id, args.test)
    if name == "areas_nearby":
        return await client.areas_nearby(args.lat, args.lon)
    if name == "areas_search":
        return await client.areas_search(args.text)
    if name == "topics_nearby":
        return await client.topics_nearby(args.lat, args.lon)
    return await client.check_allowance()


async def _run(args: argparse.Namespace) -> int:
    if not args.offline and not args.token:
        print("Missing token. Set ESP_TOKEN or pass --token.", file=sys.stderr)
        return 2
    operations = args.operations or list(_OPERATIONS)
    failures = 0
    if args.token:
        print(f"Token: {_mask_token(args.token)}", file=sys.stderr)
    async with EskomSePush(
        args.token,
        offline=args.offline,
        base_url=args.base_url,
        lenient_timestamps=args.lenient_timestamps,
    ) as client:
        for name in operations:
            try:
                result = await _run_operation(client, name, args)
            except PyEskomSePushError as exc:
                failures += 1
                print(f"{name}: {exc.__class__.__name__}: {exc}", file=sys.stderr)
                if args.traceback:
                    traceback.print_exc()
                continue
            data = _to_jsonable(result)
            if args.sanitize_output:
                data = _sanitize_data(data)
            print(f"== {name}")
            print(json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False))
    return 1 if failures else 0


def main() -> int:
    args = _parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    _LOGGER.debug("Running operations: %s", args.operations or "all")
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
