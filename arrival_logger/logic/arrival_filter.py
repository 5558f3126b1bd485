"""Route and arrival-time filtering of arrival records."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from arrival_logger.config import FilterConfig
from arrival_logger.data.models import ArrivalRecord, FilteredRow
from arrival_logger.errors import TypeMismatchError
from arrival_logger.logic.coerce import coerce_to_int

UNKNOWN_SEATS = -1


def _passes_route(route_name: int, config: FilterConfig) -> bool:
    return config.route_name is None or route_name == config.route_name


def _passes_ceiling(predicted_minutes: int, config: FilterConfig) -> bool:
    return config.max_predict_minutes is None or predicted_minutes < config.max_predict_minutes


def _remaining_seats(record: ArrivalRecord) -> int:
    try:
        return coerce_to_int(record.remaining_seats)
    except TypeMismatchError:
        return UNKNOWN_SEATS


def filter_record(
    record: ArrivalRecord,
    timestamp: datetime,
    config: FilterConfig,
) -> FilteredRow | None:
    """Return the row for a single record, or ``None`` if it is filtered out."""
    try:
        route_name = coerce_to_int(record.route_name)
    except TypeMismatchError:
        return None
    if not _passes_route(route_name, config):
        return None

    try:
        predicted_minutes = coerce_to_int(record.predicted_minutes)
    except TypeMismatchError:
        return None
    if not _passes_ceiling(predicted_minutes, config):
        return None

    return FilteredRow(
        timestamp=timestamp,
        predicted_minutes=predicted_minutes,
        remaining_seats=_remaining_seats(record),
        station_name=record.station_name,
    )


def filter_arrivals(
    records: Iterable[ArrivalRecord],
    timestamp: datetime,
    config: FilterConfig,
) -> list[FilteredRow]:
    """Filter records in order, stamping every kept row with ``timestamp``."""
    rows: list[FilteredRow] = []
    for record in records:
        row = filter_record(record, timestamp, config)
        if row is not None:
            rows.append(row)
    return rows
