from __future__ import annotations
import operator
import typing
from ..types import *
from ..exceptions import TypeMismatch
from ..helpers import get_value

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _AggregateOperations(Generic[K, V]):
    """numeric folds over the values. an empty collection aggregates to 0."""

    def _field_values(self: 'Collection[K, V]', field: Optional[FieldPath]) -> List[Any]:
        """helper to pull the aggregated operand out of every value"""
        data = self.get_data().values()
        if field is None:
            return list(data)
        return [get_value(item, field, 0) for item in data]

    def sum(self: 'Collection[K, V]', field: Optional[FieldPath] = None) -> Union[int, float]:
        """calc sum of the values, or of a field of each value"""
        values = self._field_values(field)
        try:
            return self._new(values).reduce(operator.add, 0)
        except TypeError as exc:
            raise TypeMismatch(f"cannot sum non-numeric values: {exc}") from exc

    def max(self: 'Collection[K, V]', field: Optional[FieldPath] = None) -> Any:
        """find maximum, 0 for an empty collection"""
        return self._extreme(field, operator.gt)

    def min(self: 'Collection[K, V]', field: Optional[FieldPath] = None) -> Any:
        """find minimum, 0 for an empty collection"""
        return self._extreme(field, operator.lt)

    def _extreme(self: 'Collection[K, V]', field: Optional[FieldPath], better: Callable[[Any, Any], bool]) -> Any:
        def pick(carry, value):
            # the first value seeds the fold
            if carry is MISSING:
                return value
            return value if better(value, carry) else carry

        try:
            result = self._new(self._field_values(field)).reduce(pick, MISSING)
        except TypeError as exc:
            raise TypeMismatch(f"values are not comparable: {exc}") from exc
        return 0 if result is MISSING else result
