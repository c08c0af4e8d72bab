from __future__ import annotations
import typing
from ..types import *
from ..compare import sort_key, stable_sort, multisort
from ..helpers import get_value

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _OrderingOperations(Generic[K, V]):
    """
    associative sorts: entries are reordered but every key stays attached to its value.
    all sorts are stable, ties keep their original relative order in both directions.
    """

    def sort(self: 'Collection[K, V]',
             direction: SortDirection = DEFAULT_DIRECTION,
             flag: SortFlag = DEFAULT_FLAG) -> 'Collection[K, V]':
        """sort entries by value"""
        to_key = sort_key(flag)
        pairs = stable_sort(list(self.get_data().items()), lambda pair: to_key(pair[1]), direction)
        return self._new(dict(pairs))

    def sort_by_key(self: 'Collection[K, V]',
                    direction: SortDirection = DEFAULT_DIRECTION,
                    flag: SortFlag = DEFAULT_FLAG) -> 'Collection[K, V]':
        """sort entries by key"""
        to_key = sort_key(flag)
        pairs = stable_sort(list(self.get_data().items()), lambda pair: to_key(pair[0]), direction)
        return self._new(dict(pairs))

    def sort_natural(self: 'Collection[K, V]', case_sensitive: bool = False) -> 'Collection[K, V]':
        """sort values treating digit runs as numbers, 'img2' before 'img10'"""
        flag = SortFlag.NATURAL if case_sensitive else SortFlag.NATURAL | SortFlag.FLAG_CASE
        return self.sort(SortDirection.ASC, flag)

    def sort_by(self: 'Collection[K, V]',
                key: Union[FieldPath, List[FieldPath]],
                direction: Union[SortDirection, List[SortDirection]] = DEFAULT_DIRECTION,
                flag: Union[SortFlag, List[SortFlag]] = DEFAULT_FLAG) -> 'Collection[K, V]':
        """
        sort entries by one or more fields of their values.

        key is a field name, dotted path, accessor function, or a list of those
        for a composite sort (first entry is the primary key). direction and flag
        are either applied to every key or given as lists matched to the keys
        index by index.
        """
        fields = list(key) if isinstance(key, list) else [key]
        selectors = [lambda pair, f=f: get_value(pair[1], f) for f in fields]
        pairs = multisort(list(self.get_data().items()), selectors, direction, flag)
        return self._new(dict(pairs))
