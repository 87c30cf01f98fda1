from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class BatchContext:
    """
    Shared state for a batch run.
    Passed from the CLI into the pipeline; holds counters and collected errors.
    """

    config: Any
    logger: Any

    use_european_order: bool = False

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: List[Dict[str, Any]] = field(default_factory=list)
