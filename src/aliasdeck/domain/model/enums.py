"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class CatalogKind(StrEnum):
    OTP = "otp"
    WORKSPACE = "workspace"
