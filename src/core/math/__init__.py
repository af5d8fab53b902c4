"""
Core math modules для fracheap

Чистая арифметика дробей: НОД, НОК, сложение и сокращение.
"""

from src.core.math.fraction_arithmetic import (
    FractionLike,
    add_fractions,
    gcd,
    lcm,
    reduce_fraction,
)

__all__ = [
    # Types
    "FractionLike",
    # НОД / НОК
    "gcd",
    "lcm",
    # Операции над дробями
    "add_fractions",
    "reduce_fraction",
]
