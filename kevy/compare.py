"""
comparison and ordering primitives shared by the collection sort operations.

sorting is always done with python's stable sort on derived sort keys, one key
builder per SortFlag mode. multi-key sorts run one stable pass per key, from the
last key to the first.
"""
from __future__ import annotations
import locale
import logging
import re
from functools import cmp_to_key
from .types import *
from .exceptions import InvalidArgument, ArgumentCountMismatch, TypeMismatch

logger = logging.getLogger(__name__)

_DIGIT_RUNS = re.compile(r'(\d+)')
_MODES = (SortFlag.REGULAR, SortFlag.NUMERIC, SortFlag.STRING,
          SortFlag.LOCALE_STRING, SortFlag.NATURAL)
_VALUE_TYPES = (str, bytes, int, float, complex, bool, type(None), tuple, list, dict, frozenset)

SortKey = Callable[[Any], Any]


# --- equality strategies ---

def loose_equals(a: Any, b: Any) -> bool:
    """value equality. 1 == 1.0 holds, '1' == 1 does not."""
    return a == b


def strict_equals(a: Any, b: Any) -> bool:
    """exact type and equal value for value types, identity for everything else."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    return isinstance(a, _VALUE_TYPES) and a == b


def equality(strict: bool) -> Callable[[Any, Any], bool]:
    return strict_equals if strict else loose_equals


# --- sort key builders ---

def _to_number(value: Any) -> Union[int, float]:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            pass
    raise TypeMismatch(f"cannot compare {value!r} numerically", value=value)


def _to_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    raise TypeMismatch(f"cannot compare {type(value).__name__} as a string", value=value)


def natural_key(value: Any, case_sensitive: bool = True) -> Tuple:
    """
    split a value into alternating text and digit runs so that 'img2' < 'img10'.
    re.split with a capture group always puts text at even and digits at odd
    positions, so two keys never compare a str against an int.
    """
    text = _to_text(value)
    if not case_sensitive:
        text = text.casefold()
    parts = _DIGIT_RUNS.split(text)
    return tuple(int(part) if i % 2 else part for i, part in enumerate(parts))


_NUMERIC_STRING = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float))


def compare_regular(a: Any, b: Any) -> int:
    """
    three-way comparison for REGULAR mode over mixed scalars.
    numbers compare numerically, a number or numeric string meeting a numeric
    string compares numerically too, a number meeting any other string compares
    as text. everything else uses native ordering and raises TypeError when there
    is none.
    """
    if isinstance(a, str) and isinstance(b, str):
        if _NUMERIC_STRING.match(a) and _NUMERIC_STRING.match(b):
            a, b = _to_number(a), _to_number(b)
    elif _is_number(a) and isinstance(b, str):
        if _NUMERIC_STRING.match(b):
            b = _to_number(b)
        else:
            a = str(a)
    elif isinstance(a, str) and _is_number(b):
        if _NUMERIC_STRING.match(a):
            a = _to_number(a)
        else:
            b = str(b)
    return (a > b) - (a < b)


def sort_key(flag: SortFlag = DEFAULT_FLAG) -> SortKey:
    """build the key function for a comparison mode"""
    if not isinstance(flag, SortFlag):
        try:
            flag = SortFlag(flag)
        except ValueError:
            raise InvalidArgument(f"unknown sort flag: {flag!r}", flag=flag) from None

    fold_case = bool(flag & SortFlag.FLAG_CASE)
    mode = SortFlag(int(flag) & ~int(SortFlag.FLAG_CASE))
    if mode not in _MODES:
        raise InvalidArgument(f"sort flag {flag!r} combines more than one comparison mode", flag=flag)
    if fold_case and mode not in (SortFlag.STRING, SortFlag.NATURAL):
        raise InvalidArgument("FLAG_CASE can only modify STRING or NATURAL", flag=flag)

    if mode == SortFlag.NUMERIC:
        return _to_number
    if mode == SortFlag.STRING:
        return (lambda v: _to_text(v).casefold()) if fold_case else _to_text
    if mode == SortFlag.LOCALE_STRING:
        return lambda v: locale.strxfrm(_to_text(v))
    if mode == SortFlag.NATURAL:
        return lambda v: natural_key(v, case_sensitive=not fold_case)
    return cmp_to_key(compare_regular)


def _is_descending(direction: Any) -> bool:
    if isinstance(direction, SortDirection):
        return direction is SortDirection.DESC
    try:
        return SortDirection(direction) is SortDirection.DESC
    except ValueError:
        raise InvalidArgument(f"unknown sort direction: {direction!r}", direction=direction) from None


def stable_sort(items: List[T], key: SortKey, direction: Any = DEFAULT_DIRECTION) -> List[T]:
    """sorted() with python comparison failures reported as TypeMismatch"""
    descending = _is_descending(direction)
    try:
        return sorted(items, key=key, reverse=descending)
    except TypeMismatch:
        raise
    except TypeError as exc:
        logger.debug("sort failed on incomparable values: %s", exc)
        raise TypeMismatch(f"values are not comparable: {exc}") from exc


def _broadcast(name: str, value: Any, count: int) -> List[Any]:
    """repeat a scalar argument for every sort key, or validate a parallel list"""
    if isinstance(value, (list, tuple)):
        if len(value) != count:
            raise ArgumentCountMismatch(
                f"the length of {name} must be the same as the number of sort keys",
                expected=count, actual=len(value))
        return list(value)
    return [value] * count


def multisort(items: List[T],
              selectors: List[SortKey],
              directions: Union[Any, List[Any]] = DEFAULT_DIRECTION,
              flags: Union[SortFlag, List[SortFlag]] = DEFAULT_FLAG) -> List[T]:
    """
    sort items by several keys. selectors[0] is the primary key.
    directions and flags are either single values or lists parallel to selectors.
    """
    if not selectors:
        raise InvalidArgument("at least one sort key is required")
    direction_list = _broadcast('directions', directions, len(selectors))
    flag_list = _broadcast('flags', flags, len(selectors))

    # python's sort is stable, so we sort from the last key to the first
    result = list(items)
    for selector, direction, flag in reversed(list(zip(selectors, direction_list, flag_list))):
        to_key = sort_key(flag)
        result = stable_sort(result, lambda item, s=selector, k=to_key: k(s(item)), direction)
    return result
