"""Lockfile schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter


class LockEntry(BaseModel):
    """One pinned library archive."""

    url: str = Field(..., description="Direct download URL of the archive")
    name: str = Field(..., description="Local file name: <library>-<version>.<ext>")
    integrity: Optional[str] = Field(
        default=None, description="SRI digest of the archive (required by ci runs)"
    )


LockEntryList = TypeAdapter(List[LockEntry])
