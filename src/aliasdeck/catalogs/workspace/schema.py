"""Pydantic models for workspace shortcut payloads.

Wire shape (import, export and stored blob)::

    {"alias": "Docs", "workspaceName": "Work", "tab": {"selector": {"index": 3}},
     "keywords": ["wiki"]}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aliasdeck.catalogs._types import NonBlankStr, PositiveIndex  # noqa: TC001


class WorkspaceBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SelectorPayload(WorkspaceBaseModel):
    index: PositiveIndex


class TabPayload(WorkspaceBaseModel):
    selector: SelectorPayload


class ShortcutPayload(WorkspaceBaseModel):
    alias: NonBlankStr
    workspace_name: NonBlankStr = Field(alias="workspaceName")
    tab: TabPayload
    keywords: list[str] = Field(default_factory=list)

    @field_validator("keywords", mode="before")
    @classmethod
    def _keep_string_keywords(cls, value: object) -> list[str]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]


class StoredShortcut(ShortcutPayload):
    id: NonBlankStr
