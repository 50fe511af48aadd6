"""OTP catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_float, env_str

DEFAULT_OP_TIMEOUT_SECONDS: Final[float] = 15.0


@dataclass(frozen=True, slots=True)
class OtpConfig:
    """Holds 1Password CLI and seed settings."""

    op_path: str | None = None
    seed_text: str | None = None
    timeout_seconds: float = DEFAULT_OP_TIMEOUT_SECONDS


def get_otp_config() -> OtpConfig:
    return OtpConfig(
        op_path=env_str("ALIASDECK_OP_PATH"),
        seed_text=env_str("ALIASDECK_OTP_SEED"),
        timeout_seconds=env_float("ALIASDECK_OP_TIMEOUT", default=DEFAULT_OP_TIMEOUT_SECONDS),
    )
