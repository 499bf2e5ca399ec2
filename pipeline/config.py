# pipeline/config.py
# Defaults for the request -> encoding pipeline. Override via a JSON config
# file, env vars or explicit keyword overrides (highest priority).
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


REQUESTS_DIR = "arbitrage_requests"
ENCODINGS_DIR = "arbitrage_encodings"
DEFAULT_CHAIN = "mainnet"
REQUEST_PATTERN = "*.json"


@dataclass(frozen=True)
class PipelineConfig:
    input_dir: Path
    output_dir: Path
    alt_dirs: Dict[str, Path] = field(default_factory=dict)
    default_chain: str = DEFAULT_CHAIN
    pattern: str = REQUEST_PATTERN
    report_path: Optional[Path] = None


def normalize_chain(chain: Any) -> str:
    return str(chain or "").strip().lower()


def _read_json(path: Path) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return None
    return data if isinstance(data, dict) else None


def _normalize_alt_dirs(raw: Any) -> Dict[str, Path]:
    out: Dict[str, Path] = {}
    if not isinstance(raw, dict):
        return out
    for k, v in raw.items():
        key = normalize_chain(k)
        val = str(v).strip() if v is not None else ""
        if not key or not val:
            continue
        out[key] = Path(val)
    return out


def load_pipeline_config(path: Optional[Path] = None, **overrides: Any) -> PipelineConfig:
    data: Dict[str, Any] = {}
    if path is not None:
        data = _read_json(Path(path)) or {}

    input_dir = str(data.get("input_dir") or REQUESTS_DIR)
    output_dir = str(data.get("output_dir") or ENCODINGS_DIR)
    alt_dirs = _normalize_alt_dirs(data.get("alt_dirs"))
    report_path = data.get("report_path") or None

    input_dir = os.getenv("ARB_REQUESTS_DIR") or input_dir
    output_dir = os.getenv("ARB_ENCODINGS_DIR") or output_dir
    alt_network = normalize_chain(os.getenv("ARB_ALT_NETWORK"))
    alt_dir = str(os.getenv("ARB_ALT_ENCODINGS_DIR") or "").strip()
    if alt_network and alt_dir:
        alt_dirs[alt_network] = Path(alt_dir)

    cfg: Dict[str, Any] = {
        "input_dir": Path(input_dir),
        "output_dir": Path(output_dir),
        "alt_dirs": alt_dirs,
        "default_chain": normalize_chain(data.get("default_chain")) or DEFAULT_CHAIN,
        "pattern": str(data.get("pattern") or REQUEST_PATTERN),
        "report_path": Path(report_path) if report_path else None,
    }
    for key, value in overrides.items():
        if key not in cfg:
            raise TypeError(f"unknown config key: {key}")
        if value is None:
            continue
        if key == "alt_dirs":
            merged = dict(cfg["alt_dirs"])
            merged.update(_normalize_alt_dirs(value))
            cfg[key] = merged
        elif key in ("input_dir", "output_dir", "report_path"):
            cfg[key] = Path(value)
        else:
            cfg[key] = value
    return PipelineConfig(**cfg)
