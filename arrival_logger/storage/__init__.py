"""Append-only output files."""

from arrival_logger.storage.csv_writer import CSV_HEADER, append_rows
from arrival_logger.storage.run_log import append_run_log, format_log_line

__all__ = ["CSV_HEADER", "append_rows", "append_run_log", "format_log_line"]
