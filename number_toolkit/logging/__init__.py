"""
Logging configuration and utilities for the number toolkit.
"""
from .config import configure_logging, get_logger, log_invalid_argument

__all__ = ["configure_logging", "get_logger", "log_invalid_argument"]
