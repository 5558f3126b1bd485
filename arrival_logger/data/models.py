"""Data models for arrival records and batch results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(timestamp: datetime) -> str:
    return timestamp.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class ArrivalRecord:
    """One ``busArrivalList`` entry; numeric fields arrive as numbers or strings."""

    route_name: Any
    station_name: str
    predicted_minutes: Any
    remaining_seats: Any = None


@dataclass(frozen=True)
class ArrivalResponse:
    """Decoded API envelope."""

    query_time: str | None
    result_code: Any
    result_message: str | None
    arrivals: list[ArrivalRecord] = field(default_factory=list)


@dataclass(frozen=True)
class FilteredRow:
    """A CSV row derived from an arrival record that passed the filter."""

    timestamp: datetime
    predicted_minutes: int
    remaining_seats: int
    station_name: str

    def as_csv_row(self) -> list[str]:
        return [
            format_timestamp(self.timestamp),
            str(self.predicted_minutes),
            str(self.remaining_seats),
            self.station_name,
        ]


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one batch invocation."""

    timestamp: datetime
    row_count: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        if self.error is None:
            return "success"
        # Error text may carry a multi-line response body; a run is one log line.
        return f"error: {' '.join(self.error.split())}"
