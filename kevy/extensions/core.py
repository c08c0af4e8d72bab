from __future__ import annotations
import typing
from functools import reduce as _fold
from ..types import *
from ..compare import equality
from ..exceptions import TypeMismatch
from ..helpers import with_key, merge_mappings

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _CoreOperations(Generic[K, V]):
    """membership and element-wise transformations. every method returns a new collection."""

    def contains(self: 'Collection[K, V]', value: Any, strict: bool = False) -> bool:
        """check whether any value matches"""
        matches = equality(strict)
        return any(matches(item, value) for item in self.get_data().values())

    def remove(self: 'Collection[K, V]', value: Any, strict: bool = False) -> 'Collection[K, V]':
        """drop every entry whose value matches. keys of the remaining entries are kept."""
        matches = equality(strict)
        return self._new({k: v for k, v in self.get_data().items() if not matches(v, value)})

    def replace(self: 'Collection[K, V]', value: Any, replacement: V, strict: bool = False) -> 'Collection[K, V]':
        """swap every matching value for replacement, in place"""
        matches = equality(strict)
        return self._new({k: replacement if matches(v, value) else v for k, v in self.get_data().items()})

    def map(self: 'Collection[K, V]', selector: Selector[V, U]) -> 'Collection[K, U]':
        """project each value to a new form"""
        return self._new({k: selector(v) for k, v in self.get_data().items()})

    def flat_map(self: 'Collection[K, V]', selector: Selector[V, Iterable[U]]) -> 'Collection[Any, U]':
        """project each value to a sequence and collapse the results"""
        return self.map(selector).collapse()

    def collapse(self: 'Collection[K, V]') -> 'Collection[Any, Any]':
        """
        merge all inner sequences into one collection.
        index keys are renumbered in order, label keys from later values overwrite earlier ones.
        ex: [[1, 2], [3, 4], [5, 6]] -> [1, 2, 3, 4, 5, 6]
        """
        from ..collection import Collection

        def inner_mapping(key, value) -> Mapping:
            if isinstance(value, Collection):
                return value.get_data()
            if isinstance(value, Mapping):
                return value
            if isinstance(value, (list, tuple)):
                return dict(enumerate(value))
            raise TypeMismatch(f"collapse requires every value to be a sequence, "
                               f"got {type(value).__name__} at key {key!r}", key=key)

        return self._new(merge_mappings(*(inner_mapping(k, v) for k, v in self.get_data().items())))

    def filter(self: 'Collection[K, V]', predicate: Optional[Predicate] = None) -> 'Collection[K, V]':
        """
        keep entries for which predicate(value, key) is truthy.
        one-argument predicates receive only the value. without a predicate, truthy values are kept.
        """
        if predicate is None:
            return self._new({k: v for k, v in self.get_data().items() if v})
        keep = with_key(predicate)
        return self._new({k: v for k, v in self.get_data().items() if keep(v, k)})

    def reduce(self: 'Collection[K, V]', accumulator: Accumulator[U, V], initial: Optional[U] = None) -> U:
        """left fold over the values in stored order"""
        return _fold(accumulator, self.get_data().values(), initial)

    def reverse(self: 'Collection[K, V]') -> 'Collection[K, V]':
        """invert the order of the entries, keys travel with their values"""
        return self._new(dict(reversed(self.get_data().items())))
