"""Exception hierarchy for XSD duration conversion."""


class DurationError(Exception):
    """Base exception for duration encoding and decoding errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging (CWE-209 prevention). The user message
    never echoes the rejected input.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped
        self.position = position

    def internal(self) -> str:
        return self.internal_details


class EmptyInputError(DurationError):
    """Raised when the input is zero-length."""


class InputTooLongError(DurationError):
    """Raised when the input exceeds the configured maximum length."""


class MissingMarkerError(DurationError):
    """Raised when the leading ``P`` is absent."""


class MisplacedSignError(DurationError):
    """Raised when ``-`` appears anywhere but the first position."""


class OutOfOrderDesignatorError(DurationError):
    """Raised when a designator repeats or precedes one it must follow."""


class MissingNumberError(DurationError):
    """Raised when a designator has no digits before it."""


class MissingDesignatorError(DurationError):
    """Raised when digits are not followed by a designator."""


class InvalidDecimalPointError(DurationError):
    """Raised when a decimal point is outside seconds or lacks a following digit."""


class MissingSeparatorError(DurationError):
    """Raised when time components lack a preceding ``T``, or ``T`` has none."""


class NoComponentsError(DurationError):
    """Raised when the duration holds no number/designator pair."""


class UnexpectedCharacterError(DurationError):
    """Raised when characters outside the duration grammar are present."""


class NumericOverflowError(DurationError):
    """Raised when a component or the total exceeds the signed 64-bit range."""


# Sanitized user-facing error message constants
ERR_MSG_EMPTY_INPUT = "duration cannot be empty"
ERR_MSG_INPUT_TOO_LONG = "duration string too long"
ERR_MSG_MISSING_MARKER = "duration must start with 'P'"
ERR_MSG_DUPLICATE_MARKER = "'P' may only appear once"
ERR_MSG_MISPLACED_SIGN = "minus sign must be the first character"
ERR_MSG_OUT_OF_ORDER = "designator out of order"
ERR_MSG_DUPLICATE_SEPARATOR = "'T' may only appear once"
ERR_MSG_MISSING_NUMBER = "designator must be preceded by a number"
ERR_MSG_MISSING_DESIGNATOR = "number must be followed by a designator"
ERR_MSG_DECIMAL_NOT_SECONDS = "only seconds may have a decimal point"
ERR_MSG_DECIMAL_NO_LEADING_DIGITS = "decimal point must follow a digit"
ERR_MSG_DECIMAL_NO_TRAILING_DIGITS = "decimal point must be followed by a digit"
ERR_MSG_MISSING_SEPARATOR = "'T' must precede hours, minutes and seconds"
ERR_MSG_EMPTY_TIME = "'T' must be followed by hours, minutes or seconds"
ERR_MSG_NO_COMPONENTS = "duration must contain at least one number and designator"
ERR_MSG_UNEXPECTED_CHARACTER = "unexpected character in duration"
ERR_MSG_COMPONENT_OVERFLOW = "duration component out of range"
ERR_MSG_DURATION_OVERFLOW = "duration out of range"
