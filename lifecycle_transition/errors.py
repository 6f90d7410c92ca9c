from __future__ import annotations

from typing import Optional

from .rules import (
    MSG_CONFLICTING,
    MSG_DATE_NOT_MIDNIGHT,
    MSG_INVALID_DATE,
    MSG_INVALID_DAYS,
    MSG_NOT_WELL_FORMED,
)


class TransitionError(Exception):
    """Base class for every Transition decode or validation failure."""

    code = "InternalError"
    message = "Transition error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(self.message if detail is None else f"{self.message}: {detail}")

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "detail": self.detail}


# --- decode-time errors: raised while reading the document ---

class DecodeError(TransitionError):
    code = "MalformedXML"
    message = MSG_NOT_WELL_FORMED


class InvalidDateFormat(DecodeError):
    code = "InvalidArgument"
    message = MSG_INVALID_DATE


class DateNotMidnightUTC(DecodeError):
    code = "InvalidArgument"
    message = MSG_DATE_NOT_MIDNIGHT


class NegativeDaysInvalid(DecodeError):
    code = "InvalidArgument"
    message = MSG_INVALID_DAYS


# --- validation-time errors: only raised by TransitionRule.validate() ---

class RuleValidationError(TransitionError):
    pass


class ConflictingTransitionSpec(RuleValidationError):
    code = "InvalidArgument"
    message = MSG_CONFLICTING


class MalformedRule(RuleValidationError):
    code = "MalformedXML"
    message = MSG_NOT_WELL_FORMED
