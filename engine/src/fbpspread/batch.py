"""Batch evaluation over many independent observations.

Each observation is a pure function call, so a batch is split across a
thread pool and results are collected in input order.

Usage:
    results = evaluate_batch(observations)
    wind = evaluate_batch(slope_inputs, func=slope_adjustment, max_workers=4)
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable

from fbpspread.fbp.calculator import rate_of_spread_extended

logger = logging.getLogger(__name__)


def evaluate_batch(
    observations: Iterable[Any],
    func: Callable[[Any], Any] = rate_of_spread_extended,
    max_workers: int | None = None,
) -> list[Any]:
    """Evaluate func for every observation, preserving input order.

    Args:
        observations: SpreadInputs (or whatever func accepts)
        func: Per-observation function, rate_of_spread_extended by default
        max_workers: Thread pool size (None = executor default)

    Returns:
        One result per observation, in the same order
    """
    items = list(observations)
    if not items:
        return []

    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(pool.map(func, items))

    logger.debug(
        "Evaluated %d observations with %s in %.3fs",
        len(items),
        getattr(func, "__name__", repr(func)),
        time.perf_counter() - start,
    )
    return results
