"""
Тесты для Value Sources

Проверяет:
1. Разбор целых (permissive = atoi, strict)
2. PairSequenceSource / LineValueSource / ConsoleValueSource
3. Исчерпание источника
4. Интеграцию с FractionCollection.populate
"""

import io

import pytest

from src.core.domain.fraction import Fraction
from src.core.errors import ValueSourceError, ValueSourceExhausted
from src.fracheap import allocate
from src.fracheap.value_sources import (
    ConsoleValueSource,
    LineValueSource,
    PairSequenceSource,
    ValueSource,
    ValueSourceConfig,
    as_value_source,
    parse_int_permissive,
    parse_int_strict,
    read_count,
)

# =============================================================================
# ТЕСТЫ РАЗБОРА
# =============================================================================


class TestParseIntPermissive:
    """Тесты для parse_int_permissive (семантика atoi)"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("42", 42),
            ("  42abc", 42),
            ("-7", -7),
            ("+5\n", 5),
            ("\t 3 4", 3),
            ("", 0),
            ("\n", 0),
            ("x1", 0),
            ("-", 0),
            ("1.9", 1),
            ("\xa042", 0),
            ("\u200342", 0),
            ("\v\f\r 8", 8),
        ],
    )
    def test_atoi_semantics(self, text: str, expected: int) -> None:
        assert parse_int_permissive(text) == expected


class TestParseIntStrict:
    """Тесты для parse_int_strict"""

    def test_valid_integers(self) -> None:
        assert parse_int_strict("42") == 42
        assert parse_int_strict("  -7\n") == -7

    @pytest.mark.parametrize("text", ["", "abc", "42abc", "1.5", "- 3"])
    def test_invalid_text_raises(self, text: str) -> None:
        with pytest.raises(ValueSourceError, match="Expected an integer"):
            parse_int_strict(text)


class TestReadCount:
    """Тесты для read_count"""

    def test_permissive_default(self) -> None:
        assert read_count("3\n") == 3
        assert read_count("three") == 0

    def test_strict(self) -> None:
        with pytest.raises(ValueSourceError):
            read_count("three", ValueSourceConfig(strict=True))


# =============================================================================
# ТЕСТЫ ИСТОЧНИКОВ
# =============================================================================


class TestPairSequenceSource:
    """Тесты для PairSequenceSource"""

    def test_yields_pairs_in_order(self) -> None:
        source = PairSequenceSource([(1, 2), (3, 4)])
        assert source.next_pair(0) == (1, 2)
        assert source.next_pair(1) == (3, 4)

    def test_exhausted(self) -> None:
        source = PairSequenceSource([])
        with pytest.raises(ValueSourceExhausted, match="fraction 1"):
            source.next_pair(0)

    def test_fraction_items_unwrapped(self) -> None:
        """Fraction отдаётся как (numerator, denominator)"""
        source = PairSequenceSource([Fraction.of(3, 4), (5, 6)])
        assert source.next_pair(0) == (3, 4)
        assert source.next_pair(1) == (5, 6)

    def test_malformed_pair(self) -> None:
        source = PairSequenceSource([(1, 2, 3)])
        with pytest.raises(ValueSourceError, match="pair"):
            source.next_pair(0)


class TestLineValueSource:
    """Тесты для LineValueSource"""

    def test_two_lines_per_fraction(self) -> None:
        source = LineValueSource(["1\n", "2\n", "3\n", "4\n"])
        assert source.next_pair(0) == (1, 2)
        assert source.next_pair(1) == (3, 4)

    def test_reads_from_text_stream(self) -> None:
        coll = allocate(2)
        coll.populate(LineValueSource(io.StringIO("1\n2\n3\n4\n")))
        assert [f.as_tuple() for _, f in coll.enumerate()] == [(1, 2), (3, 4)]

    def test_permissive_garbage_is_zero(self) -> None:
        source = LineValueSource(["abc", "5"])
        assert source.next_pair(0) == (0, 5)

    def test_strict_garbage_raises(self) -> None:
        source = LineValueSource(["abc", "5"], ValueSourceConfig(strict=True))
        with pytest.raises(ValueSourceError):
            source.next_pair(0)

    def test_missing_denominator(self) -> None:
        source = LineValueSource(["1"])
        with pytest.raises(ValueSourceExhausted, match="denominator of fraction 1"):
            source.next_pair(0)


class TestConsoleValueSource:
    """Тесты для ConsoleValueSource"""

    @staticmethod
    def _scripted(answers: list[str]):
        prompts: list[str] = []
        replies = iter(answers)

        def fake_input(prompt: str) -> str:
            prompts.append(prompt)
            try:
                return next(replies)
            except StopIteration:
                raise EOFError from None

        return prompts, fake_input

    def test_prompts_and_parses(self) -> None:
        prompts, fake_input = self._scripted(["3", "4"])
        source = ConsoleValueSource(input_fn=fake_input)

        assert source.next_pair(0) == (3, 4)
        assert prompts == [
            "Enter numerator for fraction 1: ",
            "Enter denominator for fraction 1: ",
        ]

    def test_read_count(self) -> None:
        prompts, fake_input = self._scripted(["2"])
        source = ConsoleValueSource(input_fn=fake_input)

        assert source.read_count() == 2
        assert prompts == ["How many fractions to make? "]

    def test_eof_is_exhaustion(self) -> None:
        _, fake_input = self._scripted(["1"])
        source = ConsoleValueSource(input_fn=fake_input)

        with pytest.raises(ValueSourceExhausted):
            source.next_pair(0)

    def test_full_session(self) -> None:
        """Сценарий: количество, ввод, обращение, вывод"""
        _, fake_input = self._scripted(["3", "1", "2", "3", "4", "5", "6"])
        source = ConsoleValueSource(input_fn=fake_input)

        with allocate(source.read_count()) as coll:
            coll.populate(source)
            coll.invert_all()
            result = [f.as_tuple() for _, f in coll.enumerate()]

        assert result == [(2, 1), (4, 3), (6, 5)]


class TestAsValueSource:
    """Тесты для as_value_source"""

    def test_value_source_passed_through(self) -> None:
        source = PairSequenceSource([])
        assert as_value_source(source) is source

    def test_iterable_wrapped(self) -> None:
        source = as_value_source([(1, 2)])
        assert isinstance(source, ValueSource)
        assert source.next_pair(0) == (1, 2)
