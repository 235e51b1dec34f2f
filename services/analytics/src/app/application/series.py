"""Mapping of aggregation rows into labeled chart series.

Repositories hand back ordered rows of ``(key, value)`` straight from the
store. The mapper turns them into a :class:`LabeledSeries` without sorting,
grouping or rounding; the query is the single source of truth for all of
that. Each column is read through a :class:`SeriesType`, an explicit
conversion into the type the endpoint declares. A cell that does not fit
raises :class:`SeriesTypeMismatchError` instead of leaking through.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Number
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from shared.utils.errors import SeriesTypeMismatchError

X = TypeVar("X")
Y = TypeVar("Y")
T = TypeVar("T")

OTHER_MONTH = "Other"
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class _Rejected(Exception):
    """Raised by a converter when a cell cannot be read as its type."""


@dataclass(frozen=True)
class SeriesType(Generic[T]):
    """A named, fallible conversion from a raw row cell to ``T``."""

    name: str
    convert: Callable[[Any], T]

    def read(self, value: Any) -> Optional[T]:
        if value is None:
            return None
        return self.convert(value)


def _as_any(value: Any) -> Any:
    return value


def _as_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise _Rejected


def _as_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise _Rejected
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)) and value == value and value % 1 == 0:
        return int(value)
    raise _Rejected


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        raise _Rejected
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    raise _Rejected


ANY: SeriesType[Any] = SeriesType("any", _as_any)
STRING: SeriesType[str] = SeriesType("string", _as_string)
INTEGER: SeriesType[int] = SeriesType("integer", _as_integer)
FLOAT: SeriesType[float] = SeriesType("float", _as_float)


@dataclass(frozen=True)
class DataPoint(Generic[X, Y]):
    x: Optional[X]
    y: Optional[Y]


@dataclass(frozen=True)
class LabeledSeries(Generic[X, Y]):
    label: str
    data: List[DataPoint[X, Y]] = field(default_factory=list)


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if len(row) > index else None


def _read(
    series_type: SeriesType[T], value: Any, *, label: str, row: int, column: str
) -> Optional[T]:
    try:
        return series_type.read(value)
    except (_Rejected, ArithmeticError, ValueError) as exc:
        raise SeriesTypeMismatchError(
            f"{label}: row {row} column {column} holds {type(value).__name__}, "
            f"expected {series_type.name}",
            details={
                "label": label,
                "row": row,
                "column": column,
                "expected": series_type.name,
                "actual": type(value).__name__,
            },
        ) from exc


def map_series(
    label: str,
    rows: Optional[Sequence[Sequence[Any]]],
    x_type: SeriesType[X] = ANY,
    y_type: SeriesType[Y] = ANY,
) -> LabeledSeries[X, Y]:
    """
    Build a labeled series from ordered ``(key, value)`` rows.

    Element 0 of each row becomes ``x`` and element 1 becomes ``y``; a
    missing element reads as ``None``. ``None`` and empty ``rows`` give an
    empty series.

    Raises:
        SeriesTypeMismatchError: a cell does not fit ``x_type``/``y_type``
    """
    points: List[DataPoint[X, Y]] = []
    for index, row in enumerate(rows or ()):
        x = _read(x_type, _cell(row, 0), label=label, row=index, column="x")
        y = _read(y_type, _cell(row, 1), label=label, row=index, column="y")
        points.append(DataPoint(x, y))
    return LabeledSeries(label, points)


def month_name(value: Any) -> str:
    """
    Render a 1-12 month ordinal as "Jan".."Dec".

    ``None`` becomes "Other"; anything that is not a number in range is
    returned as its own text.
    """
    if value is None:
        return OTHER_MONTH
    if isinstance(value, Number) and not isinstance(value, bool):
        try:
            ordinal = int(value)
        except (ArithmeticError, ValueError, TypeError):
            return str(value)
        if 1 <= ordinal <= 12:
            return MONTH_ABBREVIATIONS[ordinal - 1]
    return str(value)


def map_monthly_trend(
    label: str, rows: Optional[Sequence[Sequence[Any]]]
) -> LabeledSeries[str, float]:
    """
    Build the month-trend series: month names as keys, float values.

    Unlike :func:`map_series`, a missing value becomes ``0.0``.
    """
    points: List[DataPoint[str, float]] = []
    for index, row in enumerate(rows or ()):
        value = _read(FLOAT, _cell(row, 1), label=label, row=index, column="y")
        points.append(
            DataPoint(month_name(_cell(row, 0)), value if value is not None else 0.0)
        )
    return LabeledSeries(label, points)
