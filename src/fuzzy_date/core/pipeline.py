from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Union

from fuzzy_date.core.context import BatchContext
from fuzzy_date.core.exceptions import FuzzyDateError
from fuzzy_date.dates import DateParts, EmptyDate, parse

Outcome = Union[DateParts, EmptyDate, FuzzyDateError]


@dataclass(frozen=True)
class BatchResult:
    lineno: int
    outcome: Outcome

    @property
    def ok(self) -> bool:
        return not isinstance(self.outcome, FuzzyDateError)

    def to_dict(self):
        if isinstance(self.outcome, FuzzyDateError):
            data = {
                "original": self.outcome.original,
                "error": self.outcome.kind,
                "message": self.outcome.message,
            }
        else:
            data = self.outcome.to_dict()
        return {"lineno": self.lineno, **data}


class Pipeline:
    """
    Runs many date strings through ``parse``.
    No parsing logic lives here; failures are collected, never raised.
    """

    def __init__(self, context: BatchContext):
        self.ctx = context
        self.log = context.logger

    def _reset_stats(self) -> None:
        self.ctx.stats.update(
            parsed=0,
            empty=0,
            failed=0,
            by_precision=Counter(),
            by_rule=Counter(),
            by_error=Counter(),
        )
        self.ctx.errors.clear()

    def run(self, lines: Iterable[str]) -> List[BatchResult]:
        self.log.info("Batch starting")
        self._reset_stats()
        stats = self.ctx.stats

        results: List[BatchResult] = []
        for lineno, line in enumerate(lines, start=1):
            text = line.rstrip("\r\n")
            try:
                outcome: Outcome = parse(text, use_european_order=self.ctx.use_european_order)
            except FuzzyDateError as exc:
                outcome = exc
                stats["failed"] += 1
                stats["by_error"][exc.kind] += 1
                self.ctx.errors.append(
                    {"lineno": lineno, "original": text, "error": exc.kind, "message": exc.message}
                )
                self.log.warning(f"Line {lineno}: {exc.message}")
            else:
                if isinstance(outcome, EmptyDate):
                    stats["empty"] += 1
                else:
                    stats["parsed"] += 1
                    stats["by_precision"][outcome.precision] += 1
                    stats["by_rule"][outcome.rule] += 1

            results.append(BatchResult(lineno=lineno, outcome=outcome))

        self.log.info(
            f"Batch complete: {stats['parsed']} parsed, "
            f"{stats['empty']} empty, {stats['failed']} failed"
        )
        return results
