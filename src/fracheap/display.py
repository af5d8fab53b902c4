"""
Display - человекочитаемое форматирование дробей

Форматы иллюстративные, не wire-контракт:
- запись коллекции: "<index+1>: <numerator>/<denominator>"
- сумма: "1/2 + 3/5 = 11/10"
- именованная дробь: "f1: 1/2"
"""

from typing import List

from src.core.domain.fraction import Fraction
from src.fracheap.collection import FractionCollection


def format_record(index: int, fraction: Fraction) -> str:
    """
    Examples:
        >>> format_record(0, Fraction.of(2, 1))
        '1: 2/1'
    """
    return f"{index + 1}: {fraction}"


def render_collection(collection: FractionCollection) -> List[str]:
    """Строки format_record для всех записей коллекции по порядку."""
    return [format_record(index, fraction) for index, fraction in collection.enumerate()]


def format_sum(f1: Fraction, f2: Fraction, result: Fraction) -> str:
    return f"{f1} + {f2} = {result}"


def format_labelled(label: str, fraction: Fraction) -> str:
    return f"{label}: {fraction}"
