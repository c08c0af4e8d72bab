from enum import Enum, IntFlag
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Union[int, str]
Predicate = Callable[..., bool]
Selector = Callable[[T], U]
Accumulator = Callable[[U, T], U]
# a field path, an accessor function, or a list of path segments
FieldPath = Union[Key, Callable[[Any], Any], Sequence[Any]]


class SortDirection(Enum):
    """direction of an ordering operation"""
    ASC = 'asc'
    DESC = 'desc'


class SortFlag(IntFlag):
    """
    comparison mode used by the sort operations.
    FLAG_CASE is a modifier and can be or-ed with STRING or NATURAL.
    """
    REGULAR = 0
    NUMERIC = 1
    STRING = 2
    LOCALE_STRING = 4
    NATURAL = 8
    FLAG_CASE = 16


class CursorState(Enum):
    """lifecycle of a cursor iterator"""
    UNINITIALIZED = 'uninitialized'
    POSITIONED = 'positioned'
    EXHAUSTED = 'exhausted'


DEFAULT_DIRECTION = SortDirection.ASC
DEFAULT_FLAG = SortFlag.REGULAR


class _Missing:
    """sentinel for 'no value', distinct from None"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
