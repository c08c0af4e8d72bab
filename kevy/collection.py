from __future__ import annotations

import logging
from .types import *
from .exceptions import KeyNotFound, UnsupportedOperation
from .helpers import coerce_mapping
from .cursor import CursorIterator

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.ordering import _OrderingOperations
from .extensions.shape import _ShapeOperations
from .extensions.stats import _AggregateOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


class _BaseCollection(Generic[K, V]):
    def __init__(self, data: Union[Mapping[K, V], Iterable[V], None] = None):
        """init with a mapping, another collection, or an iterable keyed 0..n-1"""
        self._data: Dict[K, V] = coerce_mapping(data)
        self._cursor: Optional[CursorIterator[K, V]] = None

    def _new(self, data: Union[Mapping, Iterable, None]) -> 'Collection':
        """every transformation result is a fresh instance of the receiver's class"""
        return type(self)(data)

    def get_data(self) -> Dict[K, V]:
        """the live backing mapping. treat it as read-only."""
        return self._data

    def set_data(self, data: Union[Mapping[K, V], Iterable[V], None]) -> None:
        """replace the backing mapping wholesale. running cursors keep their snapshot."""
        new_data = coerce_mapping(data)
        logger.debug("replacing %d entries with %d", len(self._data), len(new_data))
        self._data = new_data

    def count(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self.count() == 0

    def get(self, key: K) -> V:
        """value stored under key"""
        try:
            return self._data[key]
        except (KeyError, TypeError):
            raise KeyNotFound(key) from None

    def has(self, key: K) -> bool:
        try:
            return key in self._data
        except TypeError:  # unhashable
            return False

    # --- indexed interface, read-only ---

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        raise UnsupportedOperation("collection is read-only, use set_data() or a transformation", key=key)

    def __delitem__(self, key: K) -> None:
        raise UnsupportedOperation("collection is read-only, use remove() or filter()", key=key)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return self.count()

    # --- iteration ---

    def __iter__(self) -> CursorIterator[K, V]:
        """iterate the values through a fresh cursor of its own"""
        return CursorIterator(self.get_data)

    def items(self) -> Iterator[Tuple[K, V]]:
        """iterate (key, value) pairs through a fresh cursor of its own"""
        return CursorIterator(self.get_data).pairs()

    @property
    def cursor(self) -> CursorIterator[K, V]:
        """the cursor behind rewind/valid/current/key/next, attached on first use"""
        if self._cursor is None:
            self._cursor = CursorIterator(self.get_data)
        return self._cursor

    def rewind(self) -> None:
        self.cursor.rewind()

    def valid(self) -> bool:
        return self.cursor.valid()

    def current(self) -> Optional[V]:
        return self.cursor.current()

    def key(self) -> Optional[K]:
        return self.cursor.key()

    def next(self) -> None:
        self.cursor.next()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count()})"


class Collection(
    _BaseCollection[K, V],
    _CoreOperations[K, V],
    _OrderingOperations[K, V],
    _ShapeOperations[K, V],
    _AggregateOperations[K, V]
):
    """an ordered, keyed, immutable-by-convention collection with functional transformations."""

    def __init__(self, data: Union[Mapping[K, V], Iterable[V], None] = None):
        super().__init__(data)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
