"""Command-line entry point for the bus arrival logger."""

from __future__ import annotations

import argparse
from functools import partial
import logging
from typing import Sequence

from arrival_logger.batch import BatchSettings, run_batch
from arrival_logger.config import SERVICE_KEY_ENV, AppConfig, LoggingConfig, load_config
from arrival_logger.data.arrival_client import BusArrivalClient
from arrival_logger.data.scheduler import BatchScheduler, RunOnce, RunOnInterval, ScheduleStrategy

logger = logging.getLogger("arrival_logger")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoggingConfig) -> None:
    logging.basicConfig(level=config.level.upper(), format=LOG_FORMAT)


def build_scheduler(config: AppConfig, once: bool = False) -> BatchScheduler:
    """Wire the client, batch settings and schedule strategy from ``config``."""
    client = BusArrivalClient(
        service_key=config.api.service_key,
        station_id=config.api.station_id,
        base_url=config.api.base_url,
        timeout_seconds=config.api.request_timeout_seconds,
    )
    settings = BatchSettings.from_config(config)
    strategy: ScheduleStrategy
    if once or config.schedule.run_once:
        strategy = RunOnce()
    else:
        strategy = RunOnInterval(interval_seconds=config.schedule.interval_seconds)
    return BatchScheduler(job=partial(run_batch, client=client, settings=settings), strategy=strategy)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Log bus arrivals for a station to CSV")
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Path to the YAML config file",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single batch and exit",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as exc:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Invalid configuration: %s", exc)
        return 1

    configure_logging(config.log)
    if not config.api.service_key:
        logger.error("%s missing in environment", SERVICE_KEY_ENV)
        return 1

    logger.info(
        "Collecting arrivals for station %s (route=%s, max_predict_minutes=%s)",
        config.api.station_id,
        config.filter.route_name,
        config.filter.max_predict_minutes,
    )

    scheduler = build_scheduler(config, once=args.once)
    try:
        scheduler.run()
    except KeyboardInterrupt:
        scheduler.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
