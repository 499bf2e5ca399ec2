from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from calldata import EncodeError, RouteError, build_execute_call_hex, decode_route, encode_route  # noqa: E402
from calldata.utils import to_hex_prefixed  # noqa: E402
from pipeline.artifacts import configure_logging, write_json  # noqa: E402
from pipeline.batch import process_requests  # noqa: E402
from pipeline.config import DEFAULT_CHAIN, load_pipeline_config  # noqa: E402
from pipeline.loader import RequestLoadError, load_request  # noqa: E402


def _parse_alt(values: Optional[List[str]]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for item in values or []:
        network, sep, directory = str(item).partition("=")
        if not sep or not network.strip() or not directory.strip():
            raise ValueError(f"bad --alt value (expected NETWORK=DIR): {item}")
        out[network] = directory.strip()
    return out


def _cmd_batch(args: argparse.Namespace) -> int:
    logger = configure_logging(Path(args.log_dir) if args.log_dir else None)
    try:
        alt_dirs = _parse_alt(args.alt)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    cfg = load_pipeline_config(
        Path(args.config) if args.config else None,
        input_dir=args.in_dir,
        output_dir=args.out_dir,
        alt_dirs=alt_dirs or None,
        report_path=args.report,
    )
    try:
        report = process_requests(cfg)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 2
    summary = report.as_dict()
    if args.log_dir:
        write_json(Path(args.log_dir) / "summary.json", summary)
    print(json.dumps(summary, indent=2))
    return 1 if report.skipped else 0


def _cmd_encode(args: argparse.Namespace) -> int:
    logger = configure_logging()
    try:
        request = load_request(Path(args.file), default_chain=args.chain)
        encoded = encode_route(request.hops)
    except (RequestLoadError, EncodeError) as exc:
        logger.error("Error encoding arbitrage request: %s", exc)
        return 1
    print(build_execute_call_hex(encoded) if args.execute_call else to_hex_prefixed(encoded))
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    logger = configure_logging()
    try:
        route = decode_route(args.blob)
    except RouteError as exc:
        logger.error("Error decoding route: %s", exc)
        return 1
    view = {
        "amount_in": str(route.amount_in),
        "profit": str(route.profit),
        "amount_out": str(route.amount_out),
        "hops": [
            {"pool_address": h.pool_address, "is_v3": h.is_v3, "zero_for_one": h.zero_for_one}
            for h in route.hops
        ],
    }
    print(json.dumps(view, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Encode arbitrage routes into executor calldata")
    sub = parser.add_subparsers(dest="command", required=True)

    batch = sub.add_parser("batch", help="encode every request file in a directory")
    batch.add_argument("--config", type=str, default="", help="JSON config file (optional)")
    batch.add_argument("--in", dest="in_dir", type=str, default=None, help="requests directory")
    batch.add_argument("--out", dest="out_dir", type=str, default=None, help="encodings directory")
    batch.add_argument("--alt", action="append", default=None, help="NETWORK=DIR alternate destination")
    batch.add_argument("--report", type=str, default=None, help="append per-file results to this JSONL")
    batch.add_argument("--log-dir", dest="log_dir", type=str, default="", help="write run.log and summary.json here")
    batch.set_defaults(func=_cmd_batch)

    enc = sub.add_parser("encode", help="encode a single request file")
    enc.add_argument("file", type=str)
    enc.add_argument("--chain", type=str, default=DEFAULT_CHAIN, help="chain for bare hop lists")
    enc.add_argument("--execute-call", dest="execute_call", action="store_true", help="wrap as executor call data")
    enc.set_defaults(func=_cmd_encode)

    insp = sub.add_parser("inspect", help="decode an encoded route")
    insp.add_argument("blob", type=str)
    insp.set_defaults(func=_cmd_inspect)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
