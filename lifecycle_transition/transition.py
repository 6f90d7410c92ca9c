"""
Transition element codec.

Responsibilities:
- DayCountField: non-negative day count, 0 means "not provided"
- DateField: midnight-UTC date, None means "not provided"
- TransitionRule: the <Transition> element itself, plus the presence flag

Decoding only enforces per-field format rules. Cross-field rules (exactly one
of Days/Date, non-empty StorageClass) are checked by TransitionRule.validate(),
which callers invoke explicitly once the document has been read.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from dateutil.parser import isoparse

from .errors import (
    ConflictingTransitionSpec,
    DateNotMidnightUTC,
    DecodeError,
    InvalidDateFormat,
    MalformedRule,
    NegativeDaysInvalid,
)
from .rules import (
    DATE_ELEMENT,
    DAYS_ELEMENT,
    MIDNIGHT_UTC_SUFFIX,
    STORAGE_CLASS_ELEMENT,
    TRANSITION_ELEMENT,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FRACTION_RE = re.compile(r"[.,]([0-9]+)")

Fragment = Union[str, bytes, ET.Element]


def local_name(tag) -> str:
    """Strip an ElementTree "{namespace}" prefix from a tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def element_text(element: ET.Element) -> str:
    # Character data directly inside the element; nested elements are skipped
    # but the text that follows them still counts.
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


@dataclass(frozen=True)
class DayCountField:
    value: int = 0

    def __post_init__(self):
        if self.value < 0:
            raise NegativeDaysInvalid(str(self.value))

    @classmethod
    def decode(cls, text: str) -> "DayCountField":
        if text == "":
            return cls(0)
        stripped = text.strip()
        if not _INTEGER_RE.fullmatch(stripped):
            raise DecodeError(f"{DAYS_ELEMENT}: {text!r} is not an integer")
        return cls(int(stripped))

    def encode(self) -> Optional[str]:
        if self.is_absent():
            return None
        return str(self.value)

    def is_absent(self) -> bool:
        return self.value == 0


@dataclass(frozen=True)
class DateField:
    value: Optional[datetime] = None

    def __post_init__(self):
        if self.value is None:
            return
        if self.value.utcoffset() is None:
            raise InvalidDateFormat("missing UTC offset")
        if not _is_midnight_utc(self.value):
            raise DateNotMidnightUTC(self.value.isoformat())
        # Canonical tzinfo so that "Z" and "+00:00" inputs compare equal.
        object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))

    @classmethod
    def decode(cls, text: str) -> "DateField":
        """
        Parse an RFC 3339 timestamp.

        dateutil's isoparse accepts the ISO 8601 superset producers actually
        emit ("Z", "+00:00", fractional seconds). A timestamp without any
        offset is not RFC 3339 and is rejected as a format error.
        """
        try:
            parsed = isoparse(text)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateFormat(repr(text)) from exc
        if parsed.utcoffset() is None:
            raise InvalidDateFormat(repr(text))
        # isoparse truncates past microseconds; any non-zero digit still counts.
        fraction = _FRACTION_RE.search(text)
        if fraction is not None and fraction.group(1).strip("0"):
            raise DateNotMidnightUTC(repr(text))
        return cls(parsed)

    def encode(self) -> Optional[str]:
        if self.is_absent():
            return None
        return self.value.date().isoformat() + MIDNIGHT_UTC_SUFFIX

    def is_absent(self) -> bool:
        return self.value is None


def _is_midnight_utc(value: datetime) -> bool:
    clock = (value.hour, value.minute, value.second, value.microsecond)
    return clock == (0, 0, 0, 0) and value.utcoffset() == timedelta(0)


class TransitionRule:
    """
    A lifecycle <Transition> element.

    `present` is only ever set by a successful decode; a rule built directly
    is unset, encodes to nothing and always validates.
    """

    def __init__(
        self,
        days: Optional[DayCountField] = None,
        date: Optional[DateField] = None,
        storage_class: str = "",
    ):
        self.days = days if days is not None else DayCountField()
        self.date = date if date is not None else DateField()
        self.storage_class = storage_class
        self._present = False

    @property
    def present(self) -> bool:
        return self._present

    # --- decoding ---

    @classmethod
    def decode(cls, fragment: Fragment) -> "TransitionRule":
        element = _as_element(fragment)
        name = local_name(element.tag)
        if name != TRANSITION_ELEMENT:
            raise DecodeError(f"expected element type <{TRANSITION_ELEMENT}> but have <{name}>")

        days = DayCountField()
        date = DateField()
        storage_class = ""
        # Repeated children: the last one wins. Unknown children are ignored.
        for child in element:
            child_name = local_name(child.tag)
            if child_name == DAYS_ELEMENT:
                days = DayCountField.decode(element_text(child))
            elif child_name == DATE_ELEMENT:
                date = DateField.decode(element_text(child))
            elif child_name == STORAGE_CLASS_ELEMENT:
                storage_class = element_text(child)

        rule = cls(days=days, date=date, storage_class=storage_class)
        rule._present = True
        return rule

    def decode_into(self, fragment: Fragment) -> None:
        """Re-assign this rule from a fragment; left untouched if decoding fails."""
        decoded = self.decode(fragment)
        self.days = decoded.days
        self.date = decoded.date
        self.storage_class = decoded.storage_class
        self._present = True

    @classmethod
    def from_parent(cls, parent: ET.Element) -> "TransitionRule":
        """Decode the first <Transition> child of an owning element, if any."""
        for child in parent:
            if local_name(child.tag) == TRANSITION_ELEMENT:
                return cls.decode(child)
        return cls()

    # --- encoding ---

    def to_element(self) -> Optional[ET.Element]:
        if not self._present:
            return None
        element = ET.Element(TRANSITION_ELEMENT)
        days = self.days.encode()
        if days is not None:
            ET.SubElement(element, DAYS_ELEMENT).text = days
        date = self.date.encode()
        if date is not None:
            ET.SubElement(element, DATE_ELEMENT).text = date
        if self.storage_class:
            ET.SubElement(element, STORAGE_CLASS_ELEMENT).text = self.storage_class
        return element

    def encode(self) -> str:
        element = self.to_element()
        if element is None:
            return ""
        return ET.tostring(element, encoding="unicode")

    def append_to(self, parent: ET.Element) -> None:
        element = self.to_element()
        if element is not None:
            parent.append(element)

    # --- validation ---

    def validate(self) -> None:
        if not self._present:
            return
        if self.is_fully_absent():
            raise MalformedRule("Transition needs Days or Date")
        if not self.is_days_absent() and not self.is_date_absent():
            raise ConflictingTransitionSpec()
        if self.storage_class == "":
            raise MalformedRule("Transition needs StorageClass")

    def is_days_absent(self) -> bool:
        return self.days.is_absent()

    def is_date_absent(self) -> bool:
        return self.date.is_absent()

    def is_fully_absent(self) -> bool:
        return self.is_days_absent() and self.is_date_absent()

    def __eq__(self, other):
        if not isinstance(other, TransitionRule):
            return NotImplemented
        return (
            self.days == other.days
            and self.date == other.date
            and self.storage_class == other.storage_class
            and self._present == other._present
        )

    def __repr__(self):
        return (
            f"TransitionRule(days={self.days.value!r}, date={self.date.encode()!r}, "
            f"storage_class={self.storage_class!r}, present={self._present!r})"
        )


def _as_element(fragment: Fragment) -> ET.Element:
    if isinstance(fragment, ET.Element):
        return fragment
    try:
        return ET.fromstring(fragment)
    except ET.ParseError as exc:
        raise DecodeError(str(exc)) from exc
