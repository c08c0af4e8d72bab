from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class TerminalAccessor(Generic[K, V]):
    """conversions out of a collection. every call copies, the collection is never exposed."""

    def __init__(self, collection_instance: 'Collection[K, V]'):
        self._collection = collection_instance

    def dict(self) -> Dict[K, V]:
        """convert to a plain dict, order preserved"""
        return dict(self._collection.get_data())

    def list(self) -> List[V]:
        """convert to a list of values, keys dropped"""
        return list(self._collection.get_data().values())

    def pairs(self) -> List[Tuple[K, V]]:
        """convert to a list of (key, value) tuples"""
        return list(self._collection.get_data().items())

    def array(self) -> np.ndarray:
        """convert the values to a numpy array"""
        return np.array(self.list())

    def series(self, name: Optional[str] = None) -> pd.Series:
        """convert to a pandas series indexed by the keys"""
        data = self._collection.get_data()
        return pd.Series(list(data.values()), index=list(data.keys()), name=name, dtype=None if data else object)

    def df(self) -> pd.DataFrame:
        """convert record-like values to a pandas dataframe, one row per entry, indexed by the keys"""
        data = self._collection.get_data()
        return pd.DataFrame(list(data.values()), index=list(data.keys()))
