"""Append-only CSV table of filtered arrival rows."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Sequence

from arrival_logger.data.models import FilteredRow
from arrival_logger.errors import PersistenceError

logger = logging.getLogger(__name__)

CSV_HEADER = ["time", "predict_time", "remain_seat", "station_name"]


def _needs_header(path: Path) -> bool:
    return not path.exists() or path.stat().st_size == 0


def append_rows(path: str | Path, rows: Sequence[FilteredRow]) -> int:
    """Append ``rows`` to the CSV at ``path``; returns the number of data rows written.

    The header is written only when the file is missing or empty.
    """
    if not rows:
        return 0

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        write_header = _needs_header(target)
        with target.open("a", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            if write_header:
                writer.writerow(CSV_HEADER)
            for row in rows:
                writer.writerow(row.as_csv_row())
    except OSError as exc:
        raise PersistenceError(f"Failed to save CSV file {target}: {exc}") from exc

    logger.debug("Appended %d rows to %s (header=%s)", len(rows), target, write_header)
    return len(rows)
