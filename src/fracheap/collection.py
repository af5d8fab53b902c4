"""FractionCollection - владеющая коллекция дробей фиксированной длины.

Жизненный цикл (CollectionState):
    ALLOCATED → POPULATED → (invert_all / reduce_all)* → RELEASED

- allocate(n): резервирует n слотов; n == 0 сразу даёт POPULATED
- populate(source): заполняет все слоты из ValueSource (атомарно)
- invert_all(): меняет numerator/denominator каждой записи на месте
- enumerate(): ленивые пары (index, Fraction) по возрастанию индекса
- release(): освобождает хранилище; RELEASED - терминальное состояние

Любая операция после release() (включая повторный release) →
UseAfterRelease. Коллекция не потокобезопасна.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Iterator, List, Optional, Union

from src.core.domain.fraction import Fraction
from src.core.errors import (
    AllocationFailure,
    ArithmeticOverflow,
    CollectionNotPopulated,
    InvalidCount,
    UseAfterRelease,
    ZeroDenominator,
)
from src.core.math.fraction_arithmetic import reduce_fraction
from src.fracheap.value_sources import ValueSource, as_value_source

logger = logging.getLogger(__name__)

# Верхняя граница размера коллекции по умолчанию
DEFAULT_MAX_RECORDS: Final[int] = 10_000_000


class CollectionState(str, Enum):
    """Состояние коллекции."""

    ALLOCATED = "ALLOCATED"
    POPULATED = "POPULATED"
    RELEASED = "RELEASED"


@dataclass(frozen=True)
class CollectionLimits:
    """Ограничения на размер коллекции.

    max_records: запрос большего размера → AllocationFailure
    """

    max_records: int = DEFAULT_MAX_RECORDS


class FractionCollection:
    """Коллекция дробей фиксированной длины с явным release().

    Хранилище - список слотов, заданный при создании; его длина
    никогда не меняется до release().
    """

    def __init__(self, count: int, limits: Optional[CollectionLimits] = None):
        """
        Args:
            count: количество записей (>= 0)
            limits: ограничения размера (default CollectionLimits())

        Raises:
            InvalidCount: count не int или отрицательный
            AllocationFailure: count больше limits.max_records
                или хранилище не удалось выделить
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidCount(f"count must be an int, got {type(count).__name__}")
        if count < 0:
            raise InvalidCount(f"count must be non-negative, got {count}")

        self.limits = limits or CollectionLimits()
        if count > self.limits.max_records:
            raise AllocationFailure(
                f"Cannot allocate {count} fractions: limit is {self.limits.max_records}"
            )

        try:
            self._records: List[Optional[Fraction]] = [None] * count
        except MemoryError as e:
            raise AllocationFailure(f"Cannot allocate {count} fractions") from e

        self._count = count
        # Пустой коллекции нечего заполнять
        self._state = CollectionState.POPULATED if count == 0 else CollectionState.ALLOCATED

        logger.debug("Allocated fraction collection of %d records", count)

    # -------------------------------------------------------------------------
    # Состояние
    # -------------------------------------------------------------------------

    @property
    def state(self) -> CollectionState:
        return self._state

    @property
    def is_released(self) -> bool:
        return self._state == CollectionState.RELEASED

    def _ensure_live(self, operation: str) -> None:
        if self._state == CollectionState.RELEASED:
            logger.warning("Rejected %s on a released fraction collection", operation)
            raise UseAfterRelease(f"Cannot {operation}: collection was released")

    def _ensure_populated(self, operation: str) -> None:
        self._ensure_live(operation)
        if self._state == CollectionState.ALLOCATED:
            raise CollectionNotPopulated(
                f"Cannot {operation}: collection of {self._count} records is not populated"
            )

    # -------------------------------------------------------------------------
    # Операции жизненного цикла
    # -------------------------------------------------------------------------

    def populate(self, source: Union[ValueSource, Iterable[tuple[int, int]]]) -> None:
        """Заполнение всех слотов из источника значений.

        Пары собираются во временный список и записываются только когда
        все count пар валидны; при ошибке прежнее содержимое не меняется.

        Args:
            source: ValueSource или iterable пар (numerator, denominator)

        Raises:
            UseAfterRelease: коллекция освобождена
            ZeroDenominator: источник вернул нулевой знаменатель
            ArithmeticOverflow: значение источника вне 32-битного диапазона
            ValueSourceExhausted: источник закончился раньше времени
        """
        self._ensure_live("populate")
        value_source = as_value_source(source)

        staged: List[Fraction] = []
        for index in range(self._count):
            numerator, denominator = value_source.next_pair(index)
            try:
                staged.append(Fraction.of(numerator, denominator))
            except ZeroDenominator as e:
                raise ZeroDenominator(f"Fraction {index + 1}: {e}") from e
            except ArithmeticOverflow as e:
                raise ArithmeticOverflow(f"Fraction {index + 1}: {e}") from e
            except TypeError as e:
                raise TypeError(f"Fraction {index + 1}: {e}") from e

        self._records[:] = staged
        self._state = CollectionState.POPULATED
        logger.debug("Populated fraction collection of %d records", self._count)

    def invert_all(self) -> None:
        """Обращение каждой дроби на месте (numerator ↔ denominator).

        Двойное применение восстанавливает исходную коллекцию.

        Raises:
            ZeroDenominator: есть запись с numerator == 0; ничего не изменено
        """
        self._ensure_populated("invert_all")

        zero_indexes = [
            index for index, record in enumerate(self._records) if record.numerator == 0
        ]
        if zero_indexes:
            raise ZeroDenominator(
                "Cannot invert fractions with a zero numerator at positions "
                + ", ".join(str(index + 1) for index in zero_indexes)
            )

        for index, record in enumerate(self._records):
            self._records[index] = record.inverted()

    def reduce_all(self) -> None:
        """Сокращение каждой дроби на месте (см. reduce_fraction).

        Raises:
            ArithmeticOverflow: сокращение вывело запись за 32 бита;
                ничего не изменено
        """
        self._ensure_populated("reduce_all")
        self._records[:] = [reduce_fraction(record) for record in self._records]

    def enumerate(self) -> Iterator[tuple[int, Fraction]]:
        """Ленивые пары (index, Fraction) по возрастанию индекса.

        Каждый вызов возвращает новый итератор. Коллекция не изменяется.
        """
        self._ensure_populated("enumerate")
        return self._iter_records()

    def _iter_records(self) -> Iterator[tuple[int, Fraction]]:
        for index in range(self._count):
            self._ensure_live("enumerate")
            yield index, self._records[index]

    def snapshot(self) -> List[Fraction]:
        """Копия текущего содержимого."""
        self._ensure_populated("snapshot")
        return list(self._records)

    def release(self) -> None:
        """Освобождение хранилища. Дальнейшие операции → UseAfterRelease."""
        self._ensure_live("release")
        self._records = []
        self._state = CollectionState.RELEASED
        logger.debug("Released fraction collection of %d records", self._count)

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        self._ensure_live("len")
        return self._count

    def __bool__(self) -> bool:
        # Истинна, пока не освобождена (даже пустая)
        return not self.is_released

    def __getitem__(self, index: int) -> Fraction:
        self._ensure_populated("read a record")
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        if not 0 <= index < self._count:
            raise IndexError(f"index {index} out of range for {self._count} records")
        return self._records[index]

    def __enter__(self) -> "FractionCollection":
        self._ensure_live("enter")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.is_released:
            self.release()

    def __repr__(self) -> str:
        return f"FractionCollection(count={self._count}, state={self._state.value})"


def allocate(count: int, limits: Optional[CollectionLimits] = None) -> FractionCollection:
    """Создание коллекции из count записей (см. FractionCollection)."""
    return FractionCollection(count, limits)
