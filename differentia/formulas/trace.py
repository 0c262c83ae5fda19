from __future__ import annotations
from typing import List, Optional, Tuple

from ..config import InterpolationConfig
from ..types.result_types import AnnotatedTable, InterpolationStep, TableEntry
from ..utils.formatting import format_number


class NumberFormat:
    """Config-bound number formatting: abscissas and parameters vs. ordinates."""

    __slots__ = ('abscissa_precision', 'value_precision')

    def __init__(self, config: InterpolationConfig) -> None:
        self.abscissa_precision = config.abscissa_precision
        self.value_precision = config.display_precision

    def x(self, value: float) -> str:
        return format_number(value, self.abscissa_precision)

    def y(self, value: float) -> str:
        return format_number(value, self.value_precision)


class StepTrace:
    """
    Append-only step log built inside a single evaluation.

    When disabled every ``add`` is a no-op, so the numeric path is identical
    with or without a trace.
    """

    __slots__ = ('_steps', '_enabled', '_numbered')

    def __init__(self, enabled: bool = True) -> None:
        self._steps: List[InterpolationStep] = []
        self._enabled = enabled
        self._numbered = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    def add(
        self,
        description: str,
        *,
        formula: Optional[str] = None,
        table: Optional[AnnotatedTable] = None,
        value: Optional[float] = None,
        entries: Tuple[TableEntry, ...] = (),
    ) -> None:
        if not self._enabled:
            return
        self._steps.append(
            InterpolationStep(
                description=description,
                formula=formula,
                table=table,
                value=value,
                entries=tuple(entries),
            )
        )

    def add_numbered(self, description: str, **kwargs) -> None:
        """Add a preamble step prefixed with ``Step k:``."""
        if not self._enabled:
            return
        self._numbered += 1
        self.add(f"Step {self._numbered}: {description}", **kwargs)

    def freeze(self) -> Tuple[InterpolationStep, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)
