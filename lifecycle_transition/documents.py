"""
Uploaded bytes -> XML element tree.

The XML parser reads the bytes first, so an encoding= declaration (or a BOM)
is honored. Only when that parse fails is the text re-decoded:
- Detect encoding best-effort via charset-normalizer.
- Strip a UTF-8 BOM rather than letting it reach the parser.
- If the detected encoding cannot decode the bytes, fall back to UTF-8.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional

import structlog
from charset_normalizer import from_bytes

from .errors import DecodeError
from .rules import TRANSITION_ELEMENT, XML_ENCODING
from .transition import local_name

log = structlog.get_logger(__name__)


def decode_document_text(raw: bytes) -> str:
    if not raw.strip():
        raise DecodeError("empty document")

    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else XML_ENCODING
    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
            decode_used = "utf-8-sig"
        except UnicodeDecodeError as exc:
            raise DecodeError("document is not valid text") from exc

    log.debug("document_decoded", encoding=decode_used, size=len(raw))
    return text.lstrip("\ufeff")


def read_document(raw: bytes) -> ET.Element:
    if not raw.strip():
        raise DecodeError("empty document")

    try:
        return ET.fromstring(raw)
    except ET.ParseError as exc:
        log.debug("document_parse_retry", error=str(exc))

    text = decode_document_text(raw)
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise DecodeError(str(exc)) from exc


def find_transition(root: ET.Element) -> Optional[ET.Element]:
    """The root when it is a <Transition>, else the first one nested inside it."""
    if local_name(root.tag) == TRANSITION_ELEMENT:
        return root
    for element in root.iter():
        if local_name(element.tag) == TRANSITION_ELEMENT:
            return element
    return None
