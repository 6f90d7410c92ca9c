"""
Decode -> re-encode -> report.

Responsibilities:
- locate the <Transition> element in an uploaded document
- decode it (format errors abort here)
- re-encode it canonically
- run the deferred validation and report its outcome instead of raising
"""

from __future__ import annotations

import hashlib
from typing import Any, Dict

import structlog

from .documents import find_transition, read_document
from .errors import RuleValidationError
from .rules import XML_ENCODING
from .transition import TransitionRule

log = structlog.get_logger(__name__)


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def decode_transition_bytes(raw: bytes) -> TransitionRule:
    root = read_document(raw)
    element = find_transition(root)
    if element is None:
        log.debug("transition_not_found", root=root.tag)
        return TransitionRule()
    rule = TransitionRule.decode(element)
    log.debug("transition_decoded", rule=repr(rule))
    return rule


def build_report(rule: TransitionRule) -> Dict[str, Any]:
    error = None
    try:
        rule.validate()
    except RuleValidationError as exc:
        error = exc.to_dict()
        log.info("transition_invalid", code=exc.code, detail=exc.detail)

    return {
        "present": rule.present,
        "valid": error is None,
        "days": None if rule.is_days_absent() else rule.days.value,
        "date": rule.date.encode(),
        "storage_class": rule.storage_class if rule.present else None,
        "error": error,
    }


def normalize_transition_bytes(raw: bytes) -> Dict[str, Any]:
    """
    Returns a dict matching the API's response envelope.
    Decode errors propagate to the caller; validation errors are reported.
    """
    rule = decode_transition_bytes(raw)
    normalized = rule.encode().encode(XML_ENCODING)

    return {
        "normalized_xml": {
            "sha256": _sha256_hex(normalized),
            "encoding": XML_ENCODING,
            "content": normalized.decode(XML_ENCODING),
        },
        "report": build_report(rule),
    }
