"""Reading one-time codes for OTP records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from aliasdeck.domain.model import ReferenceTarget
from aliasdeck.domain.ports import ExternalToolError, ToolNotFoundError

if TYPE_CHECKING:
    from aliasdeck.domain.model import AliasRecord
    from aliasdeck.domain.ports import OtpReader

log = getLogger(__name__)


class OtpStatus(StrEnum):
    OK = "ok"
    TOOL_UNAVAILABLE = "tool_unavailable"
    READ_FAILED = "read_failed"


@dataclass(slots=True, frozen=True, kw_only=True)
class OtpResult:
    record: AliasRecord
    status: OtpStatus
    code: str | None = None
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is OtpStatus.OK


def fetch_code(record: AliasRecord, reader: OtpReader) -> OtpResult:
    """Read the current code for ``record``; failures become a typed result."""

    if not isinstance(record.target, ReferenceTarget):
        raise TypeError(f"Record {record.alias!r} has no OTP reference")

    try:
        code = reader(record.target.reference)
    except ToolNotFoundError as exc:
        log.warning("OTP tool unavailable: %s", exc)
        return OtpResult(record=record, status=OtpStatus.TOOL_UNAVAILABLE, message=str(exc))
    except ExternalToolError as exc:
        log.warning("Failed to read OTP for %r: %s", record.alias, exc)
        return OtpResult(record=record, status=OtpStatus.READ_FAILED, message=str(exc))

    return OtpResult(record=record, status=OtpStatus.OK, code=code.strip())
