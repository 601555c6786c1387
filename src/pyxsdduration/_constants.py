"""Unit lengths, designator order and resource limits for duration conversion."""

from __future__ import annotations

import enum
from dataclasses import dataclass

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
SECOND = 1_000_000_000 * NANOSECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

MONTHISH = 30 * DAY
"""Nominal month length. Not derived from any calendar."""

YEARISH = 356 * DAY
"""Nominal year length. Not derived from any calendar."""

MIN_ELAPSED = -(2**63)
"""Smallest representable elapsed time in nanoseconds (signed 64-bit)."""

MAX_ELAPSED = 2**63 - 1
"""Largest representable elapsed time in nanoseconds (signed 64-bit)."""

DEFAULT_MAX_INPUT_LENGTH = 256
"""Maximum accepted duration string length in characters."""

ZERO_DURATION = "PT0S"

SIGN = "-"
MARKER = "P"
SEPARATOR = "T"


class Component(enum.IntEnum):
    """Duration components in the order their designators must appear."""

    YEARS = 0
    MONTHS = 1
    DAYS = 2
    HOURS = 3
    MINUTES = 4
    SECONDS = 5

    @property
    def designator(self) -> str:
        return _DESIGNATORS[self]

    @property
    def is_time(self) -> bool:
        """True for components that must follow the ``T`` separator."""
        return self >= Component.HOURS


_DESIGNATORS: dict[Component, str] = {
    Component.YEARS: "Y",
    Component.MONTHS: "M",
    Component.DAYS: "D",
    Component.HOURS: "H",
    Component.MINUTES: "M",
    Component.SECONDS: "S",
}

DATE_DESIGNATORS: dict[str, Component] = {
    c.designator: c for c in Component if not c.is_time
}
TIME_DESIGNATORS: dict[str, Component] = {
    c.designator: c for c in Component if c.is_time
}


def has_terminating_decimal(n: int) -> bool:
    if n <= 0:
        return False
    for p in (2, 5):
        while n % p == 0:
            n //= p
    return n == 1


@dataclass(frozen=True)
class UnitTable:
    """Nanosecond lengths of each duration component.

    The same table must be used to encode and decode a value for the
    round trip to be exact. Lengths must be positive integers that
    strictly decrease from ``year`` to ``second``, and ``second`` must
    divide a power of ten so fractional seconds render as finite decimals.
    """

    year: int = YEARISH
    month: int = MONTHISH
    day: int = DAY
    hour: int = HOUR
    minute: int = MINUTE
    second: int = SECOND

    def __post_init__(self) -> None:
        lengths = self.lengths
        for component, length in zip(Component, lengths):
            if isinstance(length, bool) or not isinstance(length, int):
                raise TypeError(
                    f"{component.name.lower()} length must be an int, got {type(length).__name__}"
                )
            if length <= 0:
                raise ValueError(f"{component.name.lower()} length must be positive, got {length}")
        for longer, shorter in zip(lengths, lengths[1:]):
            if shorter >= longer:
                raise ValueError(f"unit lengths must strictly decrease: {lengths}")
        if not has_terminating_decimal(self.second):
            raise ValueError(f"second length {self.second} does not divide a power of ten")

    @property
    def lengths(self) -> tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def length(self, component: Component) -> int:
        return self.lengths[component]


DEFAULT_UNITS = UnitTable()
