from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from calldata.types import Hop


HOP_FIELDS = ("pool_address", "amount_in", "amount_out", "token_in", "token_out")


class RequestLoadError(ValueError):
    def __init__(self, reason: str, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.path = path


@dataclass(frozen=True)
class ArbitrageRequest:
    chain: str
    hops: List[Hop]
    source: Optional[Path] = None


def _parse_hop(raw: Any, idx: int, path: Optional[Path]) -> Hop:
    if not isinstance(raw, dict):
        raise RequestLoadError("invalid_request", f"hop {idx} is not an object", path=path)
    kind = raw.get("pool_type", raw.get("pool_kind"))
    missing = [name for name in HOP_FIELDS if raw.get(name) is None]
    if kind is None:
        missing.insert(0, "pool_type")
    if missing:
        raise RequestLoadError("invalid_request", f"hop {idx} missing {', '.join(missing)}", path=path)
    return Hop(
        pool_kind=str(kind),
        pool_address=str(raw["pool_address"]),
        amount_in=str(raw["amount_in"]),
        amount_out=str(raw["amount_out"]),
        token_in=str(raw["token_in"]),
        token_out=str(raw["token_out"]),
    )


def parse_request(data: Any, *, default_chain: str, path: Optional[Path] = None) -> ArbitrageRequest:
    """Build a request from decoded JSON.

    Accepts ``{"chain": ..., "request": [...]}`` or a bare list of hops.
    An empty hop list is passed through; the encoder rejects it.
    """
    if isinstance(data, list):
        chain = default_chain
        hops_raw = data
    elif isinstance(data, dict):
        chain = data.get("chain")
        if not isinstance(chain, str):
            raise RequestLoadError("missing_chain", "missing or invalid chain field", path=path)
        hops_raw = data.get("request")
        if not isinstance(hops_raw, list):
            raise RequestLoadError("invalid_request", "missing or invalid request field", path=path)
    else:
        raise RequestLoadError("invalid_request", "request must be an object or a list", path=path)
    hops = [_parse_hop(h, idx, path) for idx, h in enumerate(hops_raw)]
    return ArbitrageRequest(chain=chain, hops=hops, source=path)


def load_request(path: Path, *, default_chain: str) -> ArbitrageRequest:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RequestLoadError("unreadable_file", f"failed to read {path.name}: {exc}", path=path) from exc
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise RequestLoadError("invalid_json", f"failed to parse {path.name}: {exc}", path=path) from exc
    return parse_request(data, default_chain=default_chain, path=path)
