from __future__ import annotations
import inspect
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection


def _lookup(item: Any, key: Any) -> Any:
    """single-step lookup on a mapping, collection, sequence or object. returns MISSING if absent."""
    from .collection import Collection
    if isinstance(item, Collection):
        item = item.get_data()

    if isinstance(item, Mapping):
        try:
            return item[key] if key in item else MISSING
        except TypeError:  # unhashable key
            return MISSING

    if isinstance(item, (list, tuple)):
        if isinstance(key, int) and not isinstance(key, bool) and -len(item) <= key < len(item):
            return item[key]
        return MISSING

    if isinstance(key, str):
        return getattr(item, key, MISSING)
    return MISSING


def get_value(item: Any, key: FieldPath, default: Any = None) -> Any:
    """
    resolve a field of an element.

    key may be an accessor function, a key/attribute name, a dotted path
    ('address.city') or a list of path segments (['address', 'city']).
    returns default when any step of the path is absent.
    """
    if callable(key):
        return key(item)

    if isinstance(key, (list, tuple)):
        for segment in key:
            item = get_value(item, segment, MISSING)
            if item is MISSING:
                return default
        return item

    value = _lookup(item, key)
    if value is not MISSING:
        return value

    # direct lookup failed, so walk the dotted form
    if isinstance(key, str) and '.' in key:
        return get_value(item, key.split('.'), default)
    return default


def positional_arity(fn: Callable) -> int:
    """count of positional parameters fn accepts. varargs counts as unbounded."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        # builtins without a signature
        return 1
    count = 0
    for param in params:
        if param.kind is param.VAR_POSITIONAL:
            return 1 << 16
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def with_key(fn: Callable) -> Callable[[Any, Any], Any]:
    """adapt fn so it is always called as fn(value, key), dropping the key for one-argument callables."""
    if positional_arity(fn) >= 2:
        return fn
    return lambda value, key: fn(value)


# --- mapping primitives ---

def is_index_key(key: Any) -> bool:
    """integer keys are positional, everything else is a label"""
    return isinstance(key, int)


def coerce_mapping(data: Any, what: str = "collection data") -> Dict[Any, Any]:
    """
    copy data into a fresh ordered dict.
    mappings and collections keep their keys, other iterables are keyed 0..n-1.
    """
    from .collection import Collection
    from .exceptions import InvalidArgument

    if data is None:
        return {}
    if isinstance(data, Collection):
        return dict(data.get_data())
    if isinstance(data, Mapping):
        return dict(data)
    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise InvalidArgument(f"{what} must be a mapping or an iterable, got {type(data).__name__}")
    return dict(enumerate(data))


def merge_mappings(*mappings: Mapping[Any, Any]) -> Dict[Any, Any]:
    """
    merge mappings left to right.
    index keys are appended and renumbered from 0, label keys overwrite in place.
    """
    result: Dict[Any, Any] = {}
    next_index = 0
    for mapping in mappings:
        for key, value in mapping.items():
            if is_index_key(key):
                result[next_index] = value
                next_index += 1
            else:
                result[key] = value
    return result
