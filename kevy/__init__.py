r"""
 _
| | _______   ___   _
| |/ / _ \ \ / / | | |
|   <  __/\ V /| |_| |
|_|\_\___| \_/  \__, |
                |___/
"""
import logging

# expose the main classes
from .collection import Collection
from .cursor import CursorIterator

# expose the factory functions
from .factories import (
    collect,
    from_pairs,
    from_series,
    empty,
    C
)

# expose sort options, helpers and errors
from .types import SortDirection, SortFlag, CursorState
from .helpers import get_value
from .exceptions import (
    KevyError,
    KeyNotFound,
    UnsupportedOperation,
    InvalidArgument,
    ArgumentCountMismatch,
    TypeMismatch
)

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Collection",
    "CursorIterator",
    "collect",
    "from_pairs",
    "from_series",
    "empty",
    "C",
    "SortDirection",
    "SortFlag",
    "CursorState",
    "get_value",
    "KevyError",
    "KeyNotFound",
    "UnsupportedOperation",
    "InvalidArgument",
    "ArgumentCountMismatch",
    "TypeMismatch"
]
