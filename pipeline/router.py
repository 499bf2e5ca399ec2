from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from calldata.utils import to_hex_prefixed
from pipeline.config import PipelineConfig, normalize_chain


def destination_dir(chain: str, cfg: PipelineConfig) -> Path:
    alt = cfg.alt_dirs.get(normalize_chain(chain))
    return alt if alt is not None else cfg.output_dir


def build_output(chain: str, encoded: bytes) -> Dict[str, Any]:
    return {"chain": chain, "encoded_calldata": to_hex_prefixed(encoded)}


def write_encoding(name: str, chain: str, encoded: bytes, cfg: PipelineConfig) -> Path:
    out_dir = destination_dir(chain, cfg)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / name
    out_path.write_text(json.dumps(build_output(chain, encoded), separators=(",", ":")), encoding="utf-8")
    return out_path
