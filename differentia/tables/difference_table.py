"""
Finite-difference tables.

A table holds one read-only numpy column per order. Order 0 is the y-values,
order k has n - k entries. Forward and central tables index order k at
positions 0..n-1-k; backward tables index it at k..n-1. Any other position is
absent, never zero.
"""
from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple
import numpy as np

from ..types.method_types import DifferenceKind
from ..types.point_types import PointsInput, as_points, y_values


class DifferenceTable:
    __slots__ = ('_kind', '_columns', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, kind: DifferenceKind, columns: Sequence[np.ndarray]) -> None:
        if not columns:
            raise ValueError("A difference table needs at least the order-0 column")
        n = len(columns[0])
        frozen = []
        for order, column in enumerate(columns):
            arr = np.array(column, dtype=np.float64)
            if arr.shape != (n - order,):
                raise ValueError(
                    f"Order {order} must hold {n - order} values, got shape {arr.shape}"
                )
            arr.setflags(write=False)
            frozen.append(arr)
        self._kind = DifferenceKind(kind)
        self._columns = tuple(frozen)
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def kind(self) -> DifferenceKind:
        return self._kind

    @property
    def size(self) -> int:
        """Number of samples the table was built from."""
        return len(self._columns[0])

    @property
    def max_order(self) -> int:
        return len(self._columns) - 1

    def __len__(self) -> int:
        return len(self._columns)

    def _offset(self, order: int) -> int:
        return order if self._kind == DifferenceKind.BACKWARD else 0

    def positions(self, order: int) -> range:
        """Valid positions for ``order``; empty for orders the table does not have."""
        if not 0 <= order <= self.max_order:
            return range(0)
        start = self._offset(order)
        return range(start, start + len(self._columns[order]))

    def has(self, order: int, position: int) -> bool:
        return position in self.positions(order)

    def get(self, order: int, position: int, default: Optional[float] = None) -> Optional[float]:
        """Entry at (order, position) as a float, or ``default`` when absent."""
        if not self.has(order, position):
            return default
        return float(self._columns[order][position - self._offset(order)])

    def __getitem__(self, key: Tuple[int, int]) -> float:
        order, position = key
        if not self.has(order, position):
            raise KeyError(f"No {self._kind.value} difference of order {order} at position {position}")
        return float(self._columns[order][position - self._offset(order)])

    def column(self, order: int) -> np.ndarray:
        """Read-only array of the values of one order, in position order."""
        if not 0 <= order <= self.max_order:
            raise IndexError(f"Order {order} outside 0..{self.max_order}")
        return self._columns[order]

    def values(self, order: int) -> Tuple[float, ...]:
        return tuple(float(v) for v in self.column(order))

    def items(self, order: int) -> Iterator[Tuple[int, float]]:
        """(position, value) pairs for one order."""
        for position in self.positions(order):
            yield position, self[order, position]

    def to_lists(self) -> List[List[Optional[float]]]:
        """Dense ``[order][position]`` layout with None for absent cells."""
        n = self.size
        return [
            [self.get(order, position) for position in range(n)]
            for order in range(len(self))
        ]

    def __repr__(self) -> str:
        return f"DifferenceTable(kind={self._kind.value!r}, size={self.size})"


def _forward_columns(y: np.ndarray) -> List[np.ndarray]:
    # table[k][i] = table[k-1][i+1] - table[k-1][i]
    columns = [y]
    for _ in range(1, len(y)):
        prev = columns[-1]
        columns.append(prev[1:] - prev[:-1])
    return columns


def _y_array(points: PointsInput) -> np.ndarray:
    pts = as_points(points)
    if not pts:
        raise ValueError("Cannot build a difference table from an empty point set")
    return y_values(pts)


def raw_forward(points: PointsInput) -> DifferenceTable:
    return DifferenceTable(DifferenceKind.FORWARD, _forward_columns(_y_array(points)))


def raw_backward(points: PointsInput) -> DifferenceTable:
    """
    Backward differences, ∇ᵏy_i = ∇ᵏ⁻¹y_i - ∇ᵏ⁻¹y_{i-1}.

    The values equal the forward columns; the table stores order k from
    position k onward.
    """
    return DifferenceTable(DifferenceKind.BACKWARD, _forward_columns(_y_array(points)))


def raw_central(points: PointsInput) -> DifferenceTable:
    """Same recurrence as forward; callers index it around a mid point."""
    return DifferenceTable(DifferenceKind.CENTRAL, _forward_columns(_y_array(points)))


RAW_BUILDERS = {
    DifferenceKind.FORWARD: raw_forward,
    DifferenceKind.BACKWARD: raw_backward,
    DifferenceKind.CENTRAL: raw_central,
}


def build_raw(points: PointsInput, kind: DifferenceKind) -> DifferenceTable:
    return RAW_BUILDERS[DifferenceKind(kind)](points)
