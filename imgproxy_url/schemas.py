from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BuildUrlRequest(BaseModel):
    source_url: str = Field(alias="sourceUrl", min_length=1)
    options: Dict[str, Any] = Field(default_factory=dict)
    extension: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class BuildUrlResponse(BaseModel):
    url: str
    signed: bool


class ProxyStatus(BaseModel):
    status: str = "ok"
    signed: bool
    encode: bool


__all__ = ["BuildUrlRequest", "BuildUrlResponse", "ProxyStatus"]
