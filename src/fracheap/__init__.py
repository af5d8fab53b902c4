"""fracheap - владеющие коллекции дробей и их граничные коллабораторы.

- FractionCollection с жизненным циклом allocate/populate/invert/release
- Источники значений для populate()
- Форматирование для вывода
"""

from .collection import (
    DEFAULT_MAX_RECORDS,
    CollectionLimits,
    CollectionState,
    FractionCollection,
    allocate,
)
from .display import format_labelled, format_record, format_sum, render_collection
from .value_sources import (
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

__all__ = [
    # Collection
    "DEFAULT_MAX_RECORDS",
    "CollectionLimits",
    "CollectionState",
    "FractionCollection",
    "allocate",
    # Display
    "format_labelled",
    "format_record",
    "format_sum",
    "render_collection",
    # Value sources
    "ConsoleValueSource",
    "LineValueSource",
    "PairSequenceSource",
    "ValueSource",
    "ValueSourceConfig",
    "as_value_source",
    "parse_int_permissive",
    "parse_int_strict",
    "read_count",
]
