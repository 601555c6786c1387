"""pyxsdduration - Convert elapsed time to and from XSD duration strings."""

from __future__ import annotations

try:
    from pyxsdduration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyxsdduration._components import DurationComponents, compose, decompose
from pyxsdduration._constants import (
    DAY,
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_UNITS,
    HOUR,
    MAX_ELAPSED,
    MIN_ELAPSED,
    MINUTE,
    MONTHISH,
    SECOND,
    YEARISH,
    Component,
    UnitTable,
)
from pyxsdduration._errors import (
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
from pyxsdduration._formatter import encode, format_components
from pyxsdduration._parser import decode, parse_components

__all__ = [
    "encode",
    "decode",
    "parse_components",
    "format_components",
    "decompose",
    "compose",
    "DurationComponents",
    "Component",
    "UnitTable",
    "DEFAULT_UNITS",
    "DEFAULT_MAX_INPUT_LENGTH",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MONTHISH",
    "YEARISH",
    "MIN_ELAPSED",
    "MAX_ELAPSED",
    "DurationError",
    "EmptyInputError",
    "InputTooLongError",
    "InvalidDecimalPointError",
    "MisplacedSignError",
    "MissingDesignatorError",
    "MissingMarkerError",
    "MissingNumberError",
    "MissingSeparatorError",
    "NoComponentsError",
    "NumericOverflowError",
    "OutOfOrderDesignatorError",
    "UnexpectedCharacterError",
]
