"""Logging configuration for the service and the CLI."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(
    service_name: str, log_level: str = "INFO", log_format: str = "json"
) -> logging.LoggerAdapter:
    """Route all records to stdout, as JSON or as plain text.

    Args:
        service_name: Name attached to every record through the adapter.
        log_level: DEBUG, INFO, WARNING or ERROR.
        log_format: ``json`` for production, ``text`` for development.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if log_format.lower() == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
            static_fields={"service": service_name},
        )
        formatter.default_time_format = "%Y-%m-%dT%H:%M:%S"
        formatter.default_msec_format = "%s.%03dZ"
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root.addHandler(handler)

    logging.info("Logging initialized for %s at level %s", service_name, log_level)
    return logging.LoggerAdapter(root, {"service": service_name})
