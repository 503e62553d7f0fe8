"""
Error classification for the number toolkit.

Two failure kinds exist: invalid arguments passed by the caller, and
failures of the platform facilities the toolkit relies on (the secure
random source).
"""

from .invalid_input import InvalidArgumentError
from .system_failures import RandomSourceError, SystemFailureError

__all__ = [
    # Caller errors
    "InvalidArgumentError",
    # System failures
    "SystemFailureError",
    "RandomSourceError",
]
