"""A single fetch, filter and persist batch invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from typing import Protocol

from arrival_logger.config import AppConfig, FilterConfig
from arrival_logger.data.models import ArrivalResponse, BatchResult
from arrival_logger.errors import BatchError
from arrival_logger.logic.arrival_filter import filter_arrivals
from arrival_logger.storage.csv_writer import append_rows
from arrival_logger.storage.run_log import append_run_log

logger = logging.getLogger(__name__)


class ArrivalSource(Protocol):
    def get_arrivals(self) -> ArrivalResponse: ...


@dataclass(frozen=True)
class BatchSettings:
    """Where a batch writes and which rows it keeps."""

    csv_path: str
    log_path: str
    filter: FilterConfig = field(default_factory=FilterConfig)

    @classmethod
    def from_config(cls, config: AppConfig) -> "BatchSettings":
        return cls(
            csv_path=config.output.csv_path,
            log_path=config.output.log_path,
            filter=config.filter,
        )


def _collect(timestamp: datetime, client: ArrivalSource, settings: BatchSettings) -> BatchResult:
    response = client.get_arrivals()
    rows = filter_arrivals(response.arrivals, timestamp, settings.filter)
    logger.info("Kept %d of %d arrivals", len(rows), len(response.arrivals))
    written = append_rows(settings.csv_path, rows) if rows else 0
    return BatchResult(timestamp=timestamp, row_count=written)


def run_batch(timestamp: datetime, client: ArrivalSource, settings: BatchSettings) -> BatchResult:
    """Run one batch and record it in the run log.

    Batch errors are captured in the returned result. Only a failure to write
    the run log itself raises :class:`PersistenceError`.
    """
    logger.info("Running batch at %s", timestamp)
    try:
        result = _collect(timestamp, client, settings)
    except BatchError as exc:
        logger.error("Batch failed at %s: %s", timestamp, exc)
        result = BatchResult(timestamp=timestamp, row_count=0, error=str(exc))

    append_run_log(settings.log_path, result)
    return result
