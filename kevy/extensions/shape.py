from __future__ import annotations
import logging
import typing
from ..types import *
from ..exceptions import InvalidArgument, TypeMismatch
from ..helpers import get_value, is_index_key, merge_mappings

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


class _ShapeOperations(Generic[K, V]):
    """operations that rebuild the key/value layout of a collection"""

    def values(self: 'Collection[K, V]') -> 'Collection[int, V]':
        """the values, re-keyed 0..n-1"""
        return self._new(dict(enumerate(self.get_data().values())))

    def keys(self: 'Collection[K, V]') -> 'Collection[int, K]':
        """the keys as values, re-keyed 0..n-1"""
        return self._new(dict(enumerate(self.get_data().keys())))

    def flip(self: 'Collection[K, V]') -> 'Collection[V, K]':
        """
        swap keys and values. values must be ints or strings.
        when two values are equal the later key wins, in the slot of the first occurrence.
        """
        flipped = {}
        for k, v in self.get_data().items():
            if not isinstance(v, (int, str)):
                raise TypeMismatch(f"can only flip int and str values, got {type(v).__name__} at key {k!r}", key=k)
            flipped[v] = k
        return self._new(flipped)

    def merge(self: 'Collection[K, V]', other: Union['Collection', Mapping, List, Tuple]) -> 'Collection[Any, Any]':
        """
        merge with another collection, mapping, list or tuple.
        index-keyed entries from both sides are appended and renumbered,
        label-keyed entries from other overwrite the ones already present.
        """
        from ..collection import Collection
        if isinstance(other, Collection):
            other_data = other.get_data()
        elif isinstance(other, Mapping):
            other_data = other
        elif isinstance(other, (list, tuple)):
            other_data = dict(enumerate(other))
        else:
            raise InvalidArgument(
                f"collection can only be merged with a mapping, list or other collection, got {type(other).__name__}")

        data = self.get_data()
        if logger.isEnabledFor(logging.DEBUG):
            renumbered = sum(1 for k in data if is_index_key(k)) + sum(1 for k in other_data if is_index_key(k))
            logger.debug("merging %d + %d entries, renumbering %d index keys", len(data), len(other_data), renumbered)
        return self._new(merge_mappings(data, other_data))

    def convert(self: 'Collection[K, V]', from_: FieldPath, to: FieldPath) -> 'Collection[Any, Any]':
        """build a new mapping of get_value(item, from_) -> get_value(item, to)"""
        converted = {}
        for k, item in self.get_data().items():
            new_key, new_value = get_value(item, from_), get_value(item, to)
            try:
                converted[new_key] = new_value
            except TypeError as exc:
                raise TypeMismatch(f"{new_key!r} (from key {k!r}) cannot be used as a key", key=k) from exc
        return self._new(converted)

    def index_by(self: 'Collection[K, V]', key: FieldPath) -> 'Collection[Any, V]':
        """re-key every value by one of its fields"""
        return self.convert(key, lambda item: item)

    def group_by(self: 'Collection[K, V]', key: FieldPath) -> 'Collection[Any, Collection[K, V]]':
        """
        group entries by one of their fields.
        groups appear in order of first appearance, members keep their original keys.
        """
        groups: Dict[Any, Dict[K, V]] = {}
        for k, item in self.get_data().items():
            group_key = get_value(item, key)
            try:
                groups.setdefault(group_key, {})[k] = item
            except TypeError as exc:
                raise TypeMismatch(f"{group_key!r} (from key {k!r}) cannot be used as a group key", key=k) from exc
        return self._new({group_key: self._new(members) for group_key, members in groups.items()})
