"""
Invalid argument errors.

Raised when a caller passes a value outside an operation's documented
domain (zero divisor, negative factorial, inverted digit bounds).
"""

from typing import Any, Optional, Dict


class InvalidArgumentError(ValueError):
    """An argument is outside the domain of the operation."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.argument = argument
        self.value = value
        self.context = context or {}
        self.recoverable = True
