"""OTP catalog: ``label -> op://...`` pairs."""

from __future__ import annotations

from .schema import OtpPairPayload, StoredOtpPair
from .translator import (
    OTP_ATTRIBUTE_SUFFIX,
    OTP_REFERENCE_PREFIX,
    OTP_STORAGE_KEY,
    OtpCodec,
    normalize_reference,
    validate_otp_input,
)

__all__ = [
    "OTP_ATTRIBUTE_SUFFIX",
    "OTP_REFERENCE_PREFIX",
    "OTP_STORAGE_KEY",
    "OtpCodec",
    "OtpPairPayload",
    "StoredOtpPair",
    "normalize_reference",
    "validate_otp_input",
]
