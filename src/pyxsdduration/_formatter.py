"""Canonical XSD duration formatting."""

from __future__ import annotations

import logging
from datetime import timedelta
from fractions import Fraction

from pyxsdduration._components import DurationComponents, decompose
from pyxsdduration._constants import (
    DAY,
    DEFAULT_UNITS,
    MARKER,
    MAX_ELAPSED,
    MICROSECOND,
    MIN_ELAPSED,
    SECOND,
    SEPARATOR,
    SIGN,
    ZERO_DURATION,
    Component,
    UnitTable,
)
from pyxsdduration._errors import ERR_MSG_DURATION_OVERFLOW, NumericOverflowError

logger = logging.getLogger(__name__)


def _format_decimal(value: Fraction) -> str:
    """Render a non-negative terminating fraction with the fewest digits."""
    whole, rest = divmod(value.numerator, value.denominator)
    if not rest:
        return str(whole)
    digits = []
    while rest:
        digit, rest = divmod(rest * 10, value.denominator)
        digits.append(str(digit))
    return f"{whole}.{''.join(digits)}"


def _to_elapsed(value: int | timedelta) -> int:
    if isinstance(value, timedelta):
        value = value.days * DAY + value.seconds * SECOND + value.microseconds * MICROSECOND
    elif isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"cannot encode {type(value).__name__} as a duration")
    if not MIN_ELAPSED <= value <= MAX_ELAPSED:
        logger.debug("refusing to encode out-of-range duration %d", value)
        raise NumericOverflowError(
            ERR_MSG_DURATION_OVERFLOW,
            f"elapsed time {value}ns exceeds [{MIN_ELAPSED}, {MAX_ELAPSED}]",
        )
    return value


def format_components(components: DurationComponents) -> str:
    """Render components as an XSD duration, omitting every zero component.

    All-zero components render as ``PT0S`` regardless of sign.
    """
    if components.is_zero:
        return ZERO_DURATION

    parts = [SIGN] if components.negative else []
    parts.append(MARKER)
    time_started = False
    for component in Component:
        value = components.get(component)
        if not value:
            continue
        if component.is_time and not time_started:
            parts.append(SEPARATOR)
            time_started = True
        text = _format_decimal(value) if component is Component.SECONDS else str(value)
        parts.append(text + component.designator)
    return "".join(parts)


def encode(value: int | timedelta, *, units: UnitTable = DEFAULT_UNITS) -> str:
    """Encode an elapsed time as its canonical XSD duration string.

    Args:
        value: Signed elapsed time in nanoseconds, or a ``timedelta``.
        units: Unit lengths used for the decomposition. Must match the
            table used to decode the result.

    Returns:
        The shortest canonical duration, e.g. ``"P1DT2H"`` or ``"PT0S"``.

    Raises:
        TypeError: If ``value`` is not an int or timedelta.
        NumericOverflowError: If ``value`` is outside the signed 64-bit range.
    """
    elapsed = _to_elapsed(value)
    if elapsed == 0:
        return ZERO_DURATION
    return format_components(decompose(elapsed, units))
