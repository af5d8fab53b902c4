"""
Fraction - Модель рациональной дроби

Immutable Pydantic модель пары (numerator, denominator).

ИНВАРИАНТЫ:
1. denominator != 0 (проверяется при создании)
2. numerator и denominator в 32-битном знаковом диапазоне
3. Нормализация НЕ выполняется: 2/4 и 1/2 - разные значения
4. Все «изменения» создают новый экземпляр (frozen=True)
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.errors import ArithmeticOverflow, ZeroDenominator


# =============================================================================
# ДИАПАЗОН ЦЕЛЫХ
# =============================================================================

# Ширина компонент дроби: знаковый 32-битный int
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


def check_int_range(value: int, name: str) -> int:
    """
    Проверка, что целое помещается в 32-битный знаковый диапазон.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ArithmeticOverflow: Если value вне [INT32_MIN, INT32_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < INT32_MIN or value > INT32_MAX:
        raise ArithmeticOverflow(
            f"{name} {value} outside 32-bit range [{INT32_MIN}, {INT32_MAX}]"
        )

    return value


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональная дробь numerator / denominator.

    Равенство представительное (по полям): Fraction 2/4 != Fraction 1/2.
    Для приведения к несократимому виду см. reduce_fraction.
    """

    numerator: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Числитель")
    denominator: int = Field(
        ..., ge=INT32_MIN, le=INT32_MAX, description="Знаменатель (не ноль)"
    )

    model_config = {"frozen": True, "strict": True}

    @field_validator("denominator")
    @classmethod
    def validate_denominator_nonzero(cls, v: int) -> int:
        """Нулевой знаменатель запрещён."""
        if v == 0:
            raise ValueError("denominator must be nonzero")
        return v

    @classmethod
    def of(cls, numerator: int, denominator: int) -> "Fraction":
        """
        Создание дроби с доменными ошибками вместо pydantic ValidationError.

        Args:
            numerator: Числитель
            denominator: Знаменатель

        Returns:
            Новый Fraction

        Raises:
            TypeError: Если компонента не int
            ArithmeticOverflow: Если компонента вне 32-битного диапазона
            ZeroDenominator: Если denominator == 0
        """
        check_int_range(numerator, "numerator")
        check_int_range(denominator, "denominator")

        if denominator == 0:
            raise ZeroDenominator(
                f"Fraction {numerator}/{denominator} has a zero denominator"
            )

        return cls(numerator=numerator, denominator=denominator)

    @classmethod
    def with_default_numerator(cls, denominator: int) -> "Fraction":
        """Дробь, у которой задан только знаменатель (числитель = 0)."""
        return cls.of(0, denominator)

    def inverted(self) -> "Fraction":
        """
        Обратная дробь (числитель и знаменатель меняются местами).

        Raises:
            ZeroDenominator: Если numerator == 0
        """
        return Fraction.of(self.denominator, self.numerator)

    def as_tuple(self) -> tuple[int, int]:
        return (self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
