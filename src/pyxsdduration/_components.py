"""Decomposition of elapsed time into duration components and back."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from pyxsdduration._constants import (
    DEFAULT_UNITS,
    MAX_ELAPSED,
    MIN_ELAPSED,
    Component,
    UnitTable,
    has_terminating_decimal,
)
from pyxsdduration._errors import ERR_MSG_DURATION_OVERFLOW, NumericOverflowError


@dataclass(frozen=True)
class DurationComponents:
    """Signed breakdown of a duration into its six components.

    Magnitudes are not range-restricted: ``months=20`` is as valid as
    ``years=1, months=8``. Only :func:`decompose` guarantees the canonical
    greedy form.
    """

    negative: bool = False
    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        for component in Component:
            if component is Component.SECONDS:
                continue
            value = self.get(component)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{component.name.lower()} must be an int")
            if value < 0:
                raise ValueError(f"{component.name.lower()} must not be negative")
        seconds = Fraction(self.seconds)
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        if not has_terminating_decimal(seconds.denominator):
            raise ValueError(f"seconds {seconds} has no finite decimal form")
        object.__setattr__(self, "seconds", seconds)

    def get(self, component: Component) -> int | Fraction:
        return getattr(self, component.name.lower())

    @property
    def is_zero(self) -> bool:
        return not any(self.get(c) for c in Component)


def decompose(value: int, units: UnitTable = DEFAULT_UNITS) -> DurationComponents:
    """Greedily split ``value`` nanoseconds into components, largest unit first.

    Each integer component is the largest count of its unit that fits in
    the remainder left by the larger units; whatever remains becomes an
    exact fraction of a second.
    """
    remainder = abs(value)
    counts: list[int] = []
    for component in Component:
        if component is Component.SECONDS:
            break
        count, remainder = divmod(remainder, units.length(component))
        counts.append(count)
    return DurationComponents(
        value < 0,
        *counts,
        seconds=Fraction(remainder, units.second),
    )


def compose(components: DurationComponents, units: UnitTable = DEFAULT_UNITS) -> int:
    """Return the signed nanosecond total of ``components``.

    Sub-nanosecond fractions of a second are truncated toward zero.

    Raises:
        NumericOverflowError: If the total is outside the signed 64-bit range.
    """
    total = sum(
        components.get(c) * units.length(c) for c in Component if c is not Component.SECONDS
    )
    total += int(components.seconds * units.second)
    if components.negative:
        total = -total
    if not MIN_ELAPSED <= total <= MAX_ELAPSED:
        raise NumericOverflowError(
            ERR_MSG_DURATION_OVERFLOW,
            f"duration total {total}ns exceeds [{MIN_ELAPSED}, {MAX_ELAPSED}]",
        )
    return total
