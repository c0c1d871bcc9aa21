"""Utility modules for the Bitcoin target tracker."""
from utils.logger import setup_logging
from utils.formatters import format_usd, format_pct, format_compact, format_timestamp, time_ago
from utils.http_client import HTTPClient, APIError
from utils.errors import TrackerError, DataUnavailable, PersistenceCorrupt
