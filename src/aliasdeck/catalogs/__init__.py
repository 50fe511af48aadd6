"""Catalog codecs: payload schemas, translators and input validation per catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from aliasdeck.domain.model import CatalogKind

from .otp import OtpCodec
from .workspace import WorkspaceCodec

if TYPE_CHECKING:
    from aliasdeck.domain.ports import CatalogCodec


def codec_for(kind: CatalogKind) -> CatalogCodec:
    if kind is CatalogKind.OTP:
        return OtpCodec()
    if kind is CatalogKind.WORKSPACE:
        return WorkspaceCodec()
    raise ValueError(f"Unsupported catalog: {kind}")


__all__ = ["OtpCodec", "WorkspaceCodec", "codec_for"]
