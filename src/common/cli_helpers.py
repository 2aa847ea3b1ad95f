"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Any, TextIO

from common.datetime import to_datetime


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_datetime_arg(value: str, field_name: str = "now") -> datetime:
    """Parse a date or datetime string for argparse arguments.

    Args:
        value: String in YYYY-MM-DD or full ISO 8601 format.
        field_name: Name of the field for error messages.

    Returns:
        Parsed datetime (midnight when only a date is given).

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid date.
    """
    try:
        return to_datetime(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"{field_name} must be YYYY-MM-DD or an ISO 8601 datetime"
        ) from exc


def write_json(payload: Any, stream: TextIO | None = None) -> None:
    """Write a JSON payload to stdout (or the given stream)."""
    stream = stream or sys.stdout
    stream.write(json.dumps(payload, default=str, ensure_ascii=False, indent=2) + "\n")
