"""
API key introspection models — /key.
"""

from typing import Optional
from pydantic import BaseModel, Field


class KeyEndpoint(BaseModel):
    model_config = {"frozen": True}

    id: str
    version: int = Field(ge=-128, le=127)
    status: bool


class KeyInfo(BaseModel):
    """/key payload"""
    model_config = {"frozen": True}

    key: str
    valid: bool
    active: bool
    created_at: Optional[str] = None
    expires_at: Optional[str] = None
    owner_cactiveconnections_id: Optional[str] = None
    endpoints: list[KeyEndpoint]
