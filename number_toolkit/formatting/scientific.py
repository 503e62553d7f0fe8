"""Scientific notation"""

from typing import Optional, Union

Number = Union[int, float]


def to_scientific(number: Number, precision: int = 2) -> str:
    """Scientific notation with precision digits after the point: 12345 -> "1.23e+04"."""
    return f"{number:.{precision}e}"


def from_scientific(text: str) -> Optional[float]:
    """Parse "1.23e+04" style text, or None when it is not a number."""
    try:
        return float(text.strip())
    except ValueError:
        return None
