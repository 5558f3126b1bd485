"""Coercion and filtering of arrival records."""

from arrival_logger.logic.arrival_filter import UNKNOWN_SEATS, filter_arrivals
from arrival_logger.logic.coerce import coerce_to_int

__all__ = ["UNKNOWN_SEATS", "coerce_to_int", "filter_arrivals"]
