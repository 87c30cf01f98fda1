
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, List, Optional, Tuple

from rich.console import Console

from fuzzy_date.config import get_config
from fuzzy_date.core.context import BatchContext
from fuzzy_date.core.pipeline import BatchResult, Pipeline
from fuzzy_date.logging import get_logger

console = Console()


def resolve_order(euro: Optional[bool]) -> bool:
    """
    Use the explicit --euro/--us choice, or fall back to config.
    """
    if euro is None:
        return get_config().european_order
    return euro


def run_batch(
    path: Path,
    *,
    use_european_order: bool,
    verbose: bool = False,
) -> Tuple[BatchContext, List[BatchResult]]:
    """
    Parse every line of ``path`` through the batch pipeline.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    ctx = BatchContext(
        config=get_config(),
        logger=get_logger("batch"),
        use_european_order=use_european_order,
    )
    with path.open("r", encoding="utf-8") as f:
        results = Pipeline(ctx).run(f)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {len(results)} lines in {elapsed:.2f}s")

    return ctx, results


def write_json(
    data: Any,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
