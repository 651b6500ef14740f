"""Utility modules for triage-ai."""

from .json_extractor import JSONExtractionError, extract_json
from .log_config import setup_logging
from .metrics import log_metric, timed_operation

__all__ = ["extract_json", "JSONExtractionError", "setup_logging", "timed_operation", "log_metric"]
