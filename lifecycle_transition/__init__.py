from .errors import (
    ConflictingTransitionSpec,
    DateNotMidnightUTC,
    DecodeError,
    InvalidDateFormat,
    MalformedRule,
    NegativeDaysInvalid,
    RuleValidationError,
    TransitionError,
)
from .transition import DateField, DayCountField, TransitionRule

__version__ = "0.1.0"

__all__ = [
    "ConflictingTransitionSpec",
    "DateField",
    "DateNotMidnightUTC",
    "DayCountField",
    "DecodeError",
    "InvalidDateFormat",
    "MalformedRule",
    "NegativeDaysInvalid",
    "RuleValidationError",
    "TransitionError",
    "TransitionRule",
]
