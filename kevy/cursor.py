from __future__ import annotations
from .types import *


class CursorIterator(Generic[K, V]):
    """
    pull-based iterator over a point-in-time snapshot of a mapping.

    the snapshot is taken on rewind(), or implicitly by the first protocol call,
    so replacing or editing the source afterwards never affects a running
    iteration. every cursor owns its own position.
    """

    def __init__(self, source: Callable[[], Mapping[K, V]]):
        self._source = source
        self._snapshot: List[Tuple[K, V]] = []
        self._position = 0
        self._state = CursorState.UNINITIALIZED

    @property
    def state(self) -> CursorState: return self._state

    def _ensure_snapshot(self) -> None:
        if self._state is CursorState.UNINITIALIZED:
            self.rewind()

    def rewind(self) -> None:
        """take a fresh snapshot and move to the first entry"""
        self._snapshot = list(self._source().items())
        self._position = 0
        self._state = CursorState.POSITIONED if self._snapshot else CursorState.EXHAUSTED

    def valid(self) -> bool:
        self._ensure_snapshot()
        return self._state is CursorState.POSITIONED

    def current(self) -> Optional[V]:
        """value at the cursor, None once exhausted"""
        if not self.valid():
            return None
        return self._snapshot[self._position][1]

    def key(self) -> Optional[K]:
        """key at the cursor, None once exhausted"""
        if not self.valid():
            return None
        return self._snapshot[self._position][0]

    def next(self) -> None:
        """advance by one entry"""
        if not self.valid():
            return
        self._position += 1
        if self._position >= len(self._snapshot):
            self._state = CursorState.EXHAUSTED

    # --- python iterator protocol ---

    def __iter__(self) -> 'CursorIterator[K, V]':
        return self

    def __next__(self) -> V:
        if not self.valid():
            raise StopIteration
        value = self.current()
        self.next()
        return value

    def pairs(self) -> Iterator[Tuple[K, V]]:
        """drain the cursor as (key, value) pairs"""
        while self.valid():
            yield self.key(), self.current()
            self.next()

    def __repr__(self) -> str:
        return f"CursorIterator(state={self._state.value}, position={self._position}, size={len(self._snapshot)})"
