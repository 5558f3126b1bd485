"""Arrival API access, models and scheduling."""

from arrival_logger.data.arrival_client import BusArrivalClient
from arrival_logger.data.models import ArrivalRecord, ArrivalResponse, BatchResult, FilteredRow
from arrival_logger.data.parser import parse_arrival_body

__all__ = [
    "ArrivalRecord",
    "ArrivalResponse",
    "BatchResult",
    "BusArrivalClient",
    "FilteredRow",
    "parse_arrival_body",
]
