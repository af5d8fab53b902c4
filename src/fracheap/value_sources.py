"""
Value Sources - поставщики пар (numerator, denominator) для populate()

Источник отдаёт одну пару на индекс, строго в порядке индексов.

Реализации:
- PairSequenceSource: заранее готовые пары (любой iterable)
- LineValueSource: по две текстовые строки на индекс (числитель, знаменатель)
- ConsoleValueSource: то же, но строки запрашиваются через input() с подсказкой

Разбор текста:
- permissive (default): семантика C atoi - ведущие пробелы, опциональный
  знак, ведущие цифры; всё остальное → 0
- strict: только целое число целиком, иначе ValueSourceError
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Protocol, Union, runtime_checkable

from src.core.domain.fraction import Fraction
from src.core.errors import ValueSourceError, ValueSourceExhausted

# Только ASCII-пробелы C isspace
_ATOI_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_STRICT_INT = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ValueSourceConfig:
    """Конфигурация разбора и подсказок для текстовых источников.

    Подсказки форматируются с index = номер дроби, начиная с 1.
    """

    strict: bool = False
    count_prompt: str = "How many fractions to make? "
    numerator_prompt: str = "Enter numerator for fraction {index}: "
    denominator_prompt: str = "Enter denominator for fraction {index}: "


# =============================================================================
# РАЗБОР ЦЕЛЫХ
# =============================================================================


def parse_int_permissive(text: str) -> int:
    """
    Разбор целого с семантикой C atoi.

    Examples:
        >>> parse_int_permissive("  42abc")
        42
        >>> parse_int_permissive("-7\\n")
        -7
        >>> parse_int_permissive("")
        0
        >>> parse_int_permissive("x1")
        0
    """
    match = _ATOI_PREFIX.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def parse_int_strict(text: str) -> int:
    """
    Строгий разбор целого: вся строка (без окружающих пробелов) - число.

    Raises:
        ValueSourceError: Если строка не является целым числом
    """
    stripped = text.strip()
    if not _STRICT_INT.fullmatch(stripped):
        raise ValueSourceError(f"Expected an integer, got {text!r}")
    return int(stripped)


def get_parser(config: ValueSourceConfig) -> Callable[[str], int]:
    return parse_int_strict if config.strict else parse_int_permissive


def read_count(text: str, config: ValueSourceConfig | None = None) -> int:
    """Разбор ответа на вопрос «сколько дробей» тем же парсером."""
    return get_parser(config or ValueSourceConfig())(text)


# =============================================================================
# ИСТОЧНИКИ
# =============================================================================


@runtime_checkable
class ValueSource(Protocol):
    """Источник пар для populate(): одна пара на индекс, по порядку."""

    def next_pair(self, index: int) -> tuple[int, int]:
        ...


class PairSequenceSource:
    """Источник из готовых пар (numerator, denominator).

    Готовые Fraction (например, snapshot() другой коллекции) тоже принимаются.
    """

    def __init__(self, pairs: Iterable[tuple[int, int]]):
        self._pairs: Iterator[tuple[int, int]] = iter(pairs)

    def next_pair(self, index: int) -> tuple[int, int]:
        try:
            pair = next(self._pairs)
        except StopIteration:
            raise ValueSourceExhausted(
                f"Pair source exhausted before fraction {index + 1}"
            ) from None

        if isinstance(pair, Fraction):
            return pair.as_tuple()

        try:
            numerator, denominator = pair
        except (TypeError, ValueError) as e:
            raise ValueSourceError(
                f"Fraction {index + 1}: expected a (numerator, denominator) pair, "
                f"got {pair!r}"
            ) from e

        return numerator, denominator


class LineValueSource:
    """
    Источник из текстовых строк: числитель и знаменатель - по строке.

    Args:
        lines: Строки (например, открытый файл или список)
        config: Конфигурация разбора (default: permissive)
    """

    def __init__(self, lines: Iterable[str], config: ValueSourceConfig | None = None):
        self._lines = iter(lines)
        self._parse = get_parser(config or ValueSourceConfig())

    def _read(self, index: int, part: str) -> int:
        try:
            line = next(self._lines)
        except StopIteration:
            raise ValueSourceExhausted(
                f"Input ended before {part} of fraction {index + 1}"
            ) from None
        return self._parse(line)

    def next_pair(self, index: int) -> tuple[int, int]:
        numerator = self._read(index, "numerator")
        denominator = self._read(index, "denominator")
        return numerator, denominator


class ConsoleValueSource:
    """
    Интерактивный источник: подсказка и input() на каждую компоненту.

    Args:
        config: Конфигурация подсказок и разбора
        input_fn: Функция ввода (default: builtin input)
    """

    def __init__(
        self,
        config: ValueSourceConfig | None = None,
        input_fn: Callable[[str], str] = input,
    ):
        self.config = config or ValueSourceConfig()
        self._input = input_fn
        self._parse = get_parser(self.config)

    def _ask(self, prompt: str, index: int) -> int:
        try:
            answer = self._input(prompt.format(index=index + 1))
        except EOFError:
            raise ValueSourceExhausted(
                f"Input ended before fraction {index + 1} was complete"
            ) from None
        return self._parse(answer)

    def read_count(self) -> int:
        """Запрос количества дробей."""
        try:
            answer = self._input(self.config.count_prompt)
        except EOFError:
            raise ValueSourceExhausted("Input ended before the fraction count") from None
        return self._parse(answer)

    def next_pair(self, index: int) -> tuple[int, int]:
        numerator = self._ask(self.config.numerator_prompt, index)
        denominator = self._ask(self.config.denominator_prompt, index)
        return numerator, denominator


def as_value_source(
    source: Union[ValueSource, Iterable[tuple[int, int]]],
) -> ValueSource:
    """ValueSource как есть, iterable пар оборачивается в PairSequenceSource."""
    if isinstance(source, ValueSource):
        return source
    return PairSequenceSource(source)
