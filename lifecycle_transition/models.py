from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class NormalizedXml(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content: str = Field(default="", examples=["<Transition><Days>30</Days><StorageClass>GLACIER</StorageClass></Transition>"])


class ErrorItem(BaseModel):
    code: str
    message: str
    detail: Optional[str] = None


class TransitionReport(BaseModel):
    present: bool = False
    valid: bool = True
    days: Optional[int] = Field(default=None, examples=[30])
    date: Optional[str] = Field(default=None, examples=["2024-01-01T00:00:00Z"])
    storage_class: Optional[str] = None
    error: Optional[ErrorItem] = None


class NormalizeResponse(BaseModel):
    normalized_xml: NormalizedXml
    report: TransitionReport


class HealthResponse(BaseModel):
    ok: bool = True
