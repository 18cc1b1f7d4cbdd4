"""Batch runner service.

Manages batch lifecycle: creation, execution, and result storage.
Batches run in background threads; each batch fans its observations out
over the engine's thread pool.
"""

from __future__ import annotations

import logging
import threading
import uuid

from fbpspread.batch import evaluate_batch
from fbpspread.types import SpreadResult

from fbpspread_api.schemas.spread import BatchCreate, BatchStatus

logger = logging.getLogger(__name__)


class BatchRun:
    """Tracks state of a single batch run."""

    def __init__(self, batch_id: str, request: BatchCreate):
        self.id = batch_id
        self.request = request
        self.status: BatchStatus = BatchStatus.PENDING
        self.results: list[SpreadResult] = []
        self.error: str | None = None
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        return len(self.request.observations)

    def set_results(self, results: list[SpreadResult]) -> None:
        with self._lock:
            self.results = results

    def get_results(self) -> list[SpreadResult]:
        with self._lock:
            return list(self.results)


class BatchRunner:
    """Manages batch runs.

    Stores active and completed batches in memory.
    """

    def __init__(self) -> None:
        self._runs: dict[str, BatchRun] = {}
        self._lock = threading.Lock()

    def create(self, request: BatchCreate) -> str:
        """Create and start a new batch.

        Args:
            request: Observations and pool size

        Returns:
            Batch ID
        """
        batch_id = str(uuid.uuid4())[:8]
        run = BatchRun(batch_id, request)

        with self._lock:
            self._runs[batch_id] = run

        thread = threading.Thread(target=self._execute, args=(run,), daemon=True)
        thread.start()

        return batch_id

    def get(self, batch_id: str) -> BatchRun | None:
        with self._lock:
            return self._runs.get(batch_id)

    def _execute(self, run: BatchRun) -> None:
        """Execute a batch run."""
        run.status = BatchStatus.RUNNING

        try:
            inputs = [obs.to_inputs() for obs in run.request.observations]
            results = evaluate_batch(inputs, max_workers=run.request.max_workers)
            run.set_results(results)
            run.status = BatchStatus.COMPLETED
            logger.info("Batch %s completed: %d observations", run.id, len(results))

        except Exception as e:
            run.status = BatchStatus.FAILED
            run.error = str(e)
            logger.exception("Batch %s failed: %s", run.id, e)
