# vfs/api/schemas/upload_schema.py
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from vfs.services.upload_service import UploadOutcome


class UploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: Optional[str] = None
    hash: Optional[str] = Field(default=None, min_length=32, max_length=32)
    web_path: Optional[str] = Field(default=None, alias="webPath")
    file_id: Optional[int] = Field(default=None, alias="id")
    extension: Optional[str] = Field(default=None, alias="ext")
    name: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: UploadOutcome) -> "UploadResponse":
        # empty values are left out of the JSON, like unset ones
        return cls(
            error=outcome.error or None,
            hash=outcome.hash or None,
            web_path=outcome.web_path or None,
            file_id=outcome.file_id or None,
            extension=outcome.extension or None,
            name=outcome.name or None,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
