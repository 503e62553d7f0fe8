"""Descriptive statistics"""

from .descriptive import (
    average,
    maximum,
    median,
    minimum,
    mode,
    product,
    standard_deviation,
    total,
    value_range,
    variance,
)

__all__ = [
    "average",
    "maximum",
    "median",
    "minimum",
    "mode",
    "product",
    "standard_deviation",
    "total",
    "value_range",
    "variance",
]
