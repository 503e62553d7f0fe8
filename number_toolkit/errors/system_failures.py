"""
System failure error classifications.

These exceptions represent failures of the platform rather than of the
caller's input, and cannot be fixed by retrying with other arguments.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class RandomSourceError(SystemFailureError):
    """The operating system's secure random source is unavailable."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
