"""
Descriptive statistics over numeric sequences.

Every function accepts any iterable and reads it once. Empty input is not
an error: the aggregate functions return 0 and mode() returns [].
"""

import math
from collections import Counter
from typing import Iterable, Union

Number = Union[int, float]


def total(values: Iterable[Number]) -> Number:
    return sum(values)


def product(values: Iterable[Number]) -> Number:
    data = list(values)
    if not data:
        return 0
    return math.prod(data)


def minimum(values: Iterable[Number]) -> Number:
    return min(values, default=0)


def maximum(values: Iterable[Number]) -> Number:
    return max(values, default=0)


def value_range(values: Iterable[Number]) -> Number:
    """Spread between the largest and smallest value."""
    data = list(values)
    if not data:
        return 0
    return max(data) - min(data)


def average(values: Iterable[Number]) -> float:
    """Arithmetic mean"""
    data = list(values)
    if not data:
        return 0
    return sum(data) / len(data)


def median(values: Iterable[Number]) -> Number:
    """
    Middle value of the sorted data.

    With an even count the mean of the two middle values is returned,
    so median([1, 2, 3, 4]) == 2.5.
    """
    data = sorted(values)
    count = len(data)
    if count == 0:
        return 0

    middle = count // 2
    if count % 2:
        return data[middle]
    return (data[middle - 1] + data[middle]) / 2


def mode(values: Iterable[Number]) -> list[Number]:
    """All values sharing the highest frequency, ascending."""
    counts = Counter(values)
    if not counts:
        return []

    highest = max(counts.values())
    return sorted(value for value, count in counts.items() if count == highest)


def variance(values: Iterable[Number], population: bool = False) -> float:
    """
    Variance of the data.

    Args:
        values: Numeric data
        population: Divide by n instead of the sample divisor n-1

    Returns:
        Variance, or 0 when there are too few values for the divisor
    """
    data = list(values)
    count = len(data)
    divisor = count if population else count - 1
    if divisor <= 0:
        return 0

    mean = sum(data) / count
    return sum((x - mean) ** 2 for x in data) / divisor


def standard_deviation(values: Iterable[Number], population: bool = False) -> float:
    """Square root of variance(); sample statistic by default."""
    return math.sqrt(variance(values, population=population))
