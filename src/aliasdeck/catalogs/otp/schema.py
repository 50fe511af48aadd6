"""Pydantic models for OTP pair payloads (import text and stored blob)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from aliasdeck.catalogs._types import NonBlankStr  # noqa: TC001


class OtpBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OtpPairPayload(OtpBaseModel):
    label: NonBlankStr
    ref: NonBlankStr


class StoredOtpPair(OtpPairPayload):
    id: NonBlankStr
