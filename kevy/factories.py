import typing
from .types import *

if typing.TYPE_CHECKING:
    import pandas as pd
    from .collection import Collection

def collect(data: Union[Mapping[K, V], Iterable[V], None] = None) -> 'Collection[Any, Any]':
    """create collection from a mapping, a collection or an iterable"""
    from .collection import Collection
    return Collection(data)

def from_pairs(pairs: Iterable[Tuple[K, V]]) -> 'Collection[K, V]':
    """create collection from (key, value) pairs. later duplicates overwrite earlier ones."""
    from .collection import Collection
    return Collection(dict(pairs))

def from_series(series: 'pd.Series') -> 'Collection[Any, Any]':
    """create collection from a pandas series, keyed by its index"""
    from .collection import Collection
    return Collection(series.to_dict())

def empty() -> 'Collection[Any, Any]':
    """create empty collection"""
    from .collection import Collection
    return Collection()

# --- aliases ---
C = collect
