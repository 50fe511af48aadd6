"""Shared pydantic field types for catalog payloads."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

NonBlankStr = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]
PositiveIndex = Annotated[int, Field(strict=True, gt=0)]
