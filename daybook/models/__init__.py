from .enums import Priority, OperationStatus
from .common import (
    DATE_FORMAT,
    TIME_FORMAT,
    TIMESTAMP_FORMAT,
    TIMESTAMP_FORMAT_12H,
    combine,
    format_date,
    format_timestamp,
    parse_date,
    parse_time_of_day,
    parse_timestamp,
    timestamp_key,
)
from .event import Event, EventValidationError
from .results import OperationResult

__all__ = [
    "Priority",
    "OperationStatus",
    "DATE_FORMAT",
    "TIME_FORMAT",
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_FORMAT_12H",
    "combine",
    "format_date",
    "format_timestamp",
    "parse_date",
    "parse_time_of_day",
    "parse_timestamp",
    "timestamp_key",
    "Event",
    "EventValidationError",
    "OperationResult"
]
