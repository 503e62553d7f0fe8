"""Secure random number and OTP generation"""

from .random_numbers import generate_otp, generate_random_integer, random_float

__all__ = [
    "generate_otp",
    "generate_random_integer",
    "random_float",
]
