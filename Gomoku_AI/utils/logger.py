"""Lightweight logging utilities for matches and debugging."""

import datetime
import logging


TIME_FORMAT = "%H:%M:%S"


def log_event(message):
    timestamp = datetime.datetime.now().strftime(TIME_FORMAT)
    print(f"[{timestamp}] {message}")


def configure_logging(verbose=False):
    """Route library loggers to stderr; DEBUG shows every search decision."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] %(name)s %(levelname)s: %(message)s",
        datefmt=TIME_FORMAT,
    )
