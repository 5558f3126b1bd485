"""One-line-per-batch run log."""

from __future__ import annotations

from pathlib import Path

from arrival_logger.data.models import BatchResult, format_timestamp
from arrival_logger.errors import PersistenceError


def format_log_line(result: BatchResult) -> str:
    return f"{format_timestamp(result.timestamp)} | Count: {result.row_count} | Status: {result.status}\n"


def append_run_log(path: str | Path, result: BatchResult) -> None:
    """Append the line for ``result`` to the run log at ``path``."""
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("a", encoding="utf-8") as handle:
            handle.write(format_log_line(result))
    except OSError as exc:
        raise PersistenceError(f"Failed to write log file {target}: {exc}") from exc
