"""
Domain models and value objects.

Contains the Fraction value object and its 32-bit range guard.
"""

from src.core.domain.fraction import INT32_MAX, INT32_MIN, Fraction, check_int_range

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "Fraction",
    "check_int_range",
]
