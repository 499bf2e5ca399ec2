from __future__ import annotations

import logging
import time
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from calldata.encoder import encode_route
from calldata.errors import EncodeError
from pipeline.artifacts import append_jsonl
from pipeline.config import PipelineConfig
from pipeline.loader import RequestLoadError, load_request
from pipeline.router import write_encoding


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileResult:
    file: str
    chain: Optional[str]
    status: str
    drop_reason: Optional[str] = None
    message: Optional[str] = None
    output_path: Optional[str] = None
    calldata_len: Optional[int] = None
    hops: Optional[int] = None
    ts: int = 0


@dataclass
class BatchReport:
    results: List[FileResult] = field(default_factory=list)
    skip_reasons: Dict[str, int] = field(default_factory=lambda: defaultdict(int))

    @property
    def seen(self) -> int:
        return len(self.results)

    @property
    def encoded(self) -> int:
        return sum(1 for r in self.results if r.status == "encoded")

    @property
    def skipped(self) -> int:
        return self.seen - self.encoded

    @property
    def written(self) -> List[str]:
        return [r.output_path for r in self.results if r.output_path]

    def add(self, result: FileResult) -> None:
        self.results.append(result)
        if result.drop_reason:
            self.skip_reasons[result.drop_reason] += 1

    def as_dict(self) -> Dict[str, Any]:
        return {
            "seen": self.seen,
            "encoded": self.encoded,
            "skipped": self.skipped,
            "skip_reasons": dict(self.skip_reasons),
            "written": self.written,
        }


def _now_ms() -> int:
    return int(time.time() * 1000)


def process_file(path: Path, cfg: PipelineConfig) -> FileResult:
    name = path.name
    try:
        request = load_request(path, default_chain=cfg.default_chain)
    except RequestLoadError as exc:
        logger.error("skip %s: %s (%s)", name, exc.reason, exc)
        return FileResult(file=name, chain=None, status="skipped", drop_reason=exc.reason, message=str(exc), ts=_now_ms())

    try:
        encoded = encode_route(request.hops)
    except EncodeError as exc:
        logger.error("skip %s: %s (%s)", name, exc.reason, exc)
        return FileResult(
            file=name,
            chain=request.chain,
            status="skipped",
            drop_reason=exc.reason,
            message=str(exc),
            hops=len(request.hops),
            ts=_now_ms(),
        )

    try:
        out_path = write_encoding(name, request.chain, encoded, cfg)
    except OSError as exc:
        logger.error("skip %s: write_failed (%s)", name, exc)
        return FileResult(
            file=name,
            chain=request.chain,
            status="skipped",
            drop_reason="write_failed",
            message=str(exc),
            hops=len(request.hops),
            ts=_now_ms(),
        )

    logger.info("encoded %s -> %s", name, out_path)
    return FileResult(
        file=name,
        chain=request.chain,
        status="encoded",
        output_path=str(out_path),
        calldata_len=len(encoded),
        hops=len(request.hops),
        ts=_now_ms(),
    )


def process_requests(cfg: PipelineConfig) -> BatchReport:
    """Encode every request file in cfg.input_dir; bad files are logged and skipped."""
    in_dir = Path(cfg.input_dir)
    if not in_dir.is_dir():
        raise FileNotFoundError(f"requests directory not found: {in_dir}")

    report = BatchReport()
    for path in sorted(p for p in in_dir.glob(cfg.pattern) if p.is_file()):
        result = process_file(path, cfg)
        report.add(result)
        if cfg.report_path is not None:
            append_jsonl(cfg.report_path, asdict(result))

    logger.info("batch done: %s encoded, %s skipped", report.encoded, report.skipped)
    return report
