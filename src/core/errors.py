"""
Errors - иерархия исключений fracheap

Все ошибки библиотеки наследуются от FractionError и одновременно
от ближайшего builtin-исключения, поэтому обычные обработчики
(except ZeroDivisionError, except ValueError) продолжают работать.

КЛАССЫ ОШИБОК:
1. AllocationFailure - хранилище коллекции не удалось зарезервировать
2. DivisionByZero / ZeroDenominator - нулевой знаменатель или lcm(0, 0)
3. InvalidCount - отрицательный размер коллекции
4. UseAfterRelease - операция над освобождённой коллекцией
5. CollectionNotPopulated - чтение/трансформация до заполнения
6. ArithmeticOverflow - результат вне 32-битного диапазона
7. ValueSourceError / ValueSourceExhausted - ошибки источника значений

Ретраев нет: все операции детерминированы.
"""


class FractionError(Exception):
    """Базовое исключение fracheap."""


class AllocationFailure(FractionError, MemoryError):
    """
    Хранилище для запрошенного количества записей не получено.

    Никогда не заменяется молчаливым созданием коллекции меньшего размера.
    """


class DivisionByZero(FractionError, ZeroDivisionError):
    """Деление на ноль в lcm/add_fractions."""


class ZeroDenominator(DivisionByZero, ValueError):
    """Дробь с нулевым знаменателем (невалидные данные)."""


class InvalidCount(FractionError, ValueError):
    """Отрицательный (или нецелый) размер коллекции."""


class UseAfterRelease(FractionError, RuntimeError):
    """Операция над коллекцией в состоянии RELEASED."""


class CollectionNotPopulated(FractionError, RuntimeError):
    """Чтение или трансформация коллекции до populate()."""


class ArithmeticOverflow(FractionError, OverflowError):
    """Значение вышло за 32-битный знаковый диапазон."""


class ValueSourceError(FractionError, ValueError):
    """Источник значений вернул непригодные данные."""


class ValueSourceExhausted(ValueSourceError):
    """Источник значений закончился раньше, чем коллекция заполнена."""
