"""Strict XSD duration parsing.

The input is tokenized by a lark basic lexer. A small state machine then
consumes the tokens in one left-to-right pass, enforcing the designator
order, the ``T`` separator and decimal-point placement. Nothing is
returned unless the whole input is a well-formed duration.
"""

from __future__ import annotations

import enum
import logging
from fractions import Fraction

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters

from pyxsdduration._components import DurationComponents, compose
from pyxsdduration._constants import (
    DATE_DESIGNATORS,
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_UNITS,
    MAX_ELAPSED,
    TIME_DESIGNATORS,
    Component,
    UnitTable,
)
from pyxsdduration._errors import (
    ERR_MSG_COMPONENT_OVERFLOW,
    ERR_MSG_DECIMAL_NO_LEADING_DIGITS,
    ERR_MSG_DECIMAL_NO_TRAILING_DIGITS,
    ERR_MSG_DECIMAL_NOT_SECONDS,
    ERR_MSG_DUPLICATE_MARKER,
    ERR_MSG_DUPLICATE_SEPARATOR,
    ERR_MSG_EMPTY_INPUT,
    ERR_MSG_EMPTY_TIME,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_MISPLACED_SIGN,
    ERR_MSG_MISSING_DESIGNATOR,
    ERR_MSG_MISSING_MARKER,
    ERR_MSG_MISSING_NUMBER,
    ERR_MSG_MISSING_SEPARATOR,
    ERR_MSG_NO_COMPONENTS,
    ERR_MSG_OUT_OF_ORDER,
    ERR_MSG_UNEXPECTED_CHARACTER,
    DurationError,
    EmptyInputError,
    InputTooLongError,
    InvalidDecimalPointError,
    MisplacedSignError,
    MissingDesignatorError,
    MissingMarkerError,
    MissingNumberError,
    MissingSeparatorError,
    NoComponentsError,
    NumericOverflowError,
    OutOfOrderDesignatorError,
    UnexpectedCharacterError,
)

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
start: _token*
_token: SIGN | MARKER | SEPARATOR | DIGITS | POINT | DESIGNATOR

SIGN: "-"
MARKER: "P"
SEPARATOR: "T"
DIGITS: /[0-9]+/
POINT: "."
DESIGNATOR: /[YMDHS]/
"""

_lexer = Lark(_GRAMMAR, parser=None, lexer="basic")


class _Expect(enum.Enum):
    """What the scanner accepts next."""

    SIGN_OR_MARKER = enum.auto()
    MARKER = enum.auto()
    ITEM = enum.auto()
    DESIGNATOR = enum.auto()
    FRACTION = enum.auto()
    SECONDS = enum.auto()


_BEFORE_MARKER = (_Expect.SIGN_OR_MARKER, _Expect.MARKER)


class _Scanner:
    """State machine fed one token at a time.

    Each ``_on_<terminal>`` method handles the lexer terminal of that name.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._expect = _Expect.SIGN_OR_MARKER
        self._negative = False
        self._in_time = False
        self._last: Component | None = None
        self._whole = 0
        self._fraction = ""
        self._values: dict[Component, int | Fraction] = {}

    def _fail(
        self,
        cls: type[DurationError],
        user_message: str,
        detail: str,
        position: int,
        wrapped: Exception | None = None,
    ) -> DurationError:
        return cls(
            user_message,
            f"{detail} at offset {position} in {self._text!r}",
            wrapped=wrapped,
            position=position,
        )

    def feed(self, token: Token) -> None:
        getattr(self, f"_on_{token.type.lower()}")(token)

    def finish(self) -> DurationComponents:
        end = len(self._text)
        if self._expect in _BEFORE_MARKER:
            raise self._fail(MissingMarkerError, ERR_MSG_MISSING_MARKER, "input ended before 'P'", end)
        self._close_number(end)
        if self._in_time and (self._last is None or not self._last.is_time):
            if self._values:
                raise self._fail(
                    MissingSeparatorError, ERR_MSG_EMPTY_TIME, "'T' with no time component", end
                )
            raise self._fail(NoComponentsError, ERR_MSG_NO_COMPONENTS, "no components after 'PT'", end)
        if not self._values:
            raise self._fail(NoComponentsError, ERR_MSG_NO_COMPONENTS, "no components after 'P'", end)
        return DurationComponents(
            self._negative,
            *(self._values.get(c, 0) for c in Component if c is not Component.SECONDS),
            seconds=self._values.get(Component.SECONDS, Fraction(0)),
        )

    def unexpected(self, exc: UnexpectedCharacters) -> DurationError:
        position = exc.pos_in_stream
        where = "leading" if self._expect in _BEFORE_MARKER else "trailing"
        return self._fail(
            UnexpectedCharacterError,
            ERR_MSG_UNEXPECTED_CHARACTER,
            f"{where} character {self._text[position]!r}",
            position,
            wrapped=exc,
        )

    def _require_marker(self, token: Token) -> None:
        if self._expect in _BEFORE_MARKER:
            raise self._fail(
                MissingMarkerError, ERR_MSG_MISSING_MARKER, f"found {str(token)!r} before 'P'",
                token.start_pos,
            )

    def _close_number(self, position: int) -> None:
        """Reject a number left without its designator."""
        if self._expect is _Expect.FRACTION:
            raise self._fail(
                InvalidDecimalPointError, ERR_MSG_DECIMAL_NO_TRAILING_DIGITS, "no digit after decimal point",
                position,
            )
        if self._expect in (_Expect.DESIGNATOR, _Expect.SECONDS):
            raise self._fail(
                MissingDesignatorError, ERR_MSG_MISSING_DESIGNATOR, "number without designator",
                position,
            )

    def _on_sign(self, token: Token) -> None:
        if self._expect is not _Expect.SIGN_OR_MARKER:
            raise self._fail(
                MisplacedSignError, ERR_MSG_MISPLACED_SIGN, "minus sign not at start", token.start_pos
            )
        self._negative = True
        self._expect = _Expect.MARKER

    def _on_marker(self, token: Token) -> None:
        if self._expect not in _BEFORE_MARKER:
            raise self._fail(
                OutOfOrderDesignatorError, ERR_MSG_DUPLICATE_MARKER, "repeated 'P'", token.start_pos
            )
        self._expect = _Expect.ITEM

    def _on_separator(self, token: Token) -> None:
        self._require_marker(token)
        self._close_number(token.start_pos)
        if self._in_time:
            raise self._fail(
                OutOfOrderDesignatorError, ERR_MSG_DUPLICATE_SEPARATOR, "repeated 'T'", token.start_pos
            )
        self._in_time = True

    def _on_digits(self, token: Token) -> None:
        self._require_marker(token)
        if self._expect is _Expect.FRACTION:
            self._fraction = str(token)
            self._expect = _Expect.SECONDS
            return
        value = int(token)
        if value > MAX_ELAPSED:
            raise self._fail(
                NumericOverflowError, ERR_MSG_COMPONENT_OVERFLOW, f"component value {value} too large",
                token.start_pos,
            )
        self._whole = value
        self._expect = _Expect.DESIGNATOR

    def _on_point(self, token: Token) -> None:
        self._require_marker(token)
        if self._expect is not _Expect.DESIGNATOR:
            raise self._fail(
                InvalidDecimalPointError, ERR_MSG_DECIMAL_NO_LEADING_DIGITS, "decimal point without leading digits",
                token.start_pos,
            )
        self._expect = _Expect.FRACTION

    def _on_designator(self, token: Token) -> None:
        self._require_marker(token)
        position = token.start_pos
        if self._expect is _Expect.ITEM:
            raise self._fail(
                MissingNumberError, ERR_MSG_MISSING_NUMBER, f"no number before {str(token)!r}", position
            )
        if self._expect is _Expect.FRACTION:
            raise self._fail(
                InvalidDecimalPointError, ERR_MSG_DECIMAL_NO_TRAILING_DIGITS, "no digit after decimal point",
                position,
            )

        component = self._resolve(token)
        if self._expect is _Expect.SECONDS and component is not Component.SECONDS:
            raise self._fail(
                InvalidDecimalPointError, ERR_MSG_DECIMAL_NOT_SECONDS,
                f"decimal value for {component.name.lower()}", position,
            )
        if self._last is not None and component <= self._last:
            raise self._fail(
                OutOfOrderDesignatorError, ERR_MSG_OUT_OF_ORDER,
                f"{component.name.lower()} after {self._last.name.lower()}", position,
            )

        value: int | Fraction = self._whole
        if self._fraction:
            value += Fraction(int(self._fraction), 10 ** len(self._fraction))
        self._values[component] = value
        self._last = component
        self._whole = 0
        self._fraction = ""
        self._expect = _Expect.ITEM

    def _resolve(self, token: Token) -> Component:
        """Map a designator letter to its component for the current section."""
        letter = str(token)
        if self._in_time:
            component = TIME_DESIGNATORS.get(letter)
            if component is None:
                raise self._fail(
                    OutOfOrderDesignatorError, ERR_MSG_OUT_OF_ORDER, f"date designator {letter!r} after 'T'",
                    token.start_pos,
                )
            return component
        component = DATE_DESIGNATORS.get(letter)
        if component is None:
            raise self._fail(
                MissingSeparatorError, ERR_MSG_MISSING_SEPARATOR, f"time designator {letter!r} before 'T'",
                token.start_pos,
            )
        return component


def _as_text(text: str | bytes) -> str:
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            return bytes(text).decode("ascii")
        except UnicodeDecodeError as exc:
            raise UnexpectedCharacterError(
                ERR_MSG_UNEXPECTED_CHARACTER,
                f"non-ASCII byte at offset {exc.start}",
                wrapped=exc,
                position=exc.start,
            ) from exc
    raise TypeError(f"cannot decode {type(text).__name__} as a duration")


def _parse(text: str | bytes, max_length: int) -> DurationComponents:
    source = _as_text(text)
    if not source:
        raise EmptyInputError(ERR_MSG_EMPTY_INPUT, position=0)
    if len(source) > max_length:
        raise InputTooLongError(
            ERR_MSG_INPUT_TOO_LONG,
            f"duration length {len(source)} exceeds limit {max_length}",
        )

    scanner = _Scanner(source)
    try:
        for token in _lexer.lex(source):
            scanner.feed(token)
    except UnexpectedCharacters as exc:
        raise scanner.unexpected(exc) from exc
    return scanner.finish()


def parse_components(
    text: str | bytes,
    *,
    max_length: int = DEFAULT_MAX_INPUT_LENGTH,
) -> DurationComponents:
    """Validate an XSD duration and return its components as written.

    Component magnitudes are kept exactly as they appear, so ``P0Y20M0D``
    yields ``months=20``. Input longer than ``max_length`` characters is
    rejected with InputTooLongError before it is scanned, even if well formed.

    Raises:
        DurationError: A subclass naming the violated grammar rule.
    """
    try:
        return _parse(text, max_length)
    except DurationError as exc:
        logger.debug("rejected duration: %s", exc.internal())
        raise


def decode(
    text: str | bytes,
    *,
    units: UnitTable = DEFAULT_UNITS,
    max_length: int = DEFAULT_MAX_INPUT_LENGTH,
) -> int:
    """Decode an XSD duration into signed elapsed nanoseconds.

    Args:
        text: The duration, as str or ASCII bytes.
        units: Unit lengths used to weigh each component. Must match the
            table used to encode the value.
        max_length: Longest accepted input, in characters. Longer input is
            rejected with InputTooLongError even when it is well formed,
            e.g. long runs of leading zeros or more fractional digits than
            nanosecond precision needs. Raise it to accept such input.

    Returns:
        The elapsed time in nanoseconds.

    Raises:
        DurationError: A subclass naming the violated grammar rule, or
            NumericOverflowError if the total exceeds the signed 64-bit range.
        TypeError: If ``text`` is neither str nor bytes.
    """
    try:
        return compose(_parse(text, max_length), units)
    except DurationError as exc:
        logger.debug("rejected duration: %s", exc.internal())
        raise
