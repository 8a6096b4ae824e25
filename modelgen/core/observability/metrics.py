from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

# Named counters (process-local, used by snapshot endpoints and tests)
_NAMED = Counter()

MODELS_RENDERED_TOTAL = PromCounter(
    "modelgen_models_rendered_total",
    "Model files rendered",
    ["source"],
)

UNMAPPED_COLUMNS_TOTAL = PromCounter(
    "modelgen_unmapped_columns_total",
    "Columns whose SQL type has no Go mapping",
)


def reset_metrics() -> None:
    """
    Test helper: clears named counters to avoid cross-test leakage.
    Prometheus collectors are cumulative and are not reset.
    """
    _NAMED.clear()


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    _NAMED[name] += int(value)


def record_render(source: str, unmapped: int) -> None:
    MODELS_RENDERED_TOTAL.labels(source=source).inc()
    inc_named("models_rendered")
    if unmapped:
        UNMAPPED_COLUMNS_TOTAL.inc(unmapped)
        inc_named("unmapped_columns", unmapped)


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
