"""
Fraction Arithmetic - НОД, НОК и сложение дробей

Чистые функции value-in/value-out без состояния:
- gcd: алгоритм Евклида (знак следует Python-остатку %)
- lcm: abs(a * b) // gcd(a, b)
- add_fractions: сложение через общий знаменатель lcm, БЕЗ сокращения
- reduce_fraction: опциональное приведение к несократимому виду

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, 0) == a, gcd(0, 0) == 0
2. lcm(0, 0) → DivisionByZero (никогда не 0 и не inf)
3. add_fractions НЕ сокращает результат: 1/2 + 3/5 = 11/10, 1/4 + 1/4 = 2/4
4. Промежуточные произведения считаются в неограниченном int,
   результат обязан помещаться в 32 бита (иначе ArithmeticOverflow)
"""

from typing import Union

from src.core.domain.fraction import Fraction, check_int_range
from src.core.errors import DivisionByZero, ZeroDenominator

# Дробь или сырая пара (numerator, denominator)
FractionLike = Union[Fraction, tuple[int, int]]


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель, алгоритм Евклида.

    Знак результата следует конвенции Python-остатка (%), поэтому
    для отрицательных аргументов результат может быть отрицательным.

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        a в момент, когда второй аргумент становится нулём

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(7, 0)
        7
        >>> gcd(0, 0)
        0
        >>> gcd(4, -6)
        -2
    """
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: abs(a * b) // gcd(a, b).

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        НОК (знак совпадает со знаком gcd)

    Raises:
        DivisionByZero: Если a == 0 и b == 0
        ArithmeticOverflow: Если результат вне 32-битного диапазона

    Examples:
        >>> lcm(2, 5)
        10
        >>> lcm(4, 6)
        12
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise DivisionByZero(f"lcm({a}, {b}) is undefined: both arguments are zero")

    return check_int_range(abs(a * b) // divisor, "lcm")


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def _as_pair(value: FractionLike, name: str) -> tuple[int, int]:
    """Распаковка Fraction или сырой пары с проверкой знаменателя."""
    if isinstance(value, Fraction):
        return value.as_tuple()

    numerator, denominator = value
    if denominator == 0:
        raise ZeroDenominator(f"{name} {numerator}/{denominator} has a zero denominator")
    return numerator, denominator


def add_fractions(f1: FractionLike, f2: FractionLike) -> Fraction:
    """
    Сложение двух дробей через общий знаменатель lcm.

    Результат НЕ сокращается: вызывающий видит именно lcm-знаменатель.

    Args:
        f1: Первая дробь (Fraction или пара)
        f2: Вторая дробь (Fraction или пара)

    Returns:
        Fraction(numerator_sum, lcm(d1, d2))

    Raises:
        ZeroDenominator: Если у одной из пар знаменатель 0
        ArithmeticOverflow: Если результат вне 32-битного диапазона

    Examples:
        >>> str(add_fractions((1, 2), (3, 5)))
        '11/10'
        >>> str(add_fractions((1, 4), (1, 4)))
        '2/4'
    """
    n1, d1 = _as_pair(f1, "f1")
    n2, d2 = _as_pair(f2, "f2")

    denom = lcm(d1, d2)
    numer = (denom // d1) * n1 + (denom // d2) * n2

    return Fraction.of(check_int_range(numer, "numerator sum"), denom)


# =============================================================================
# СОКРАЩЕНИЕ
# =============================================================================


def reduce_fraction(f: FractionLike) -> Fraction:
    """
    Приведение дроби к несократимому виду.

    Знак переносится в числитель: 1/-2 → -1/2. Никогда не вызывается
    неявно из add_fractions.

    Args:
        f: Дробь (Fraction или пара)

    Returns:
        Новый несократимый Fraction с положительным знаменателем

    Raises:
        ZeroDenominator: Если знаменатель 0
        ArithmeticOverflow: Если смена знака выводит компоненту за 32 бита

    Examples:
        >>> str(reduce_fraction((2, 4)))
        '1/2'
        >>> str(reduce_fraction((3, -6)))
        '-1/2'
    """
    numerator, denominator = _as_pair(f, "fraction")

    divisor = abs(gcd(numerator, denominator))
    numerator //= divisor
    denominator //= divisor

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    return Fraction.of(numerator, denominator)
