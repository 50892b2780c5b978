"""
Staff tracker models — /staff-tracker.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class StaffFilter(str, Enum):
    ALL = "all"
    ONLINE = "online"
    OFFLINE = "offline"


class StaffPresenceEntry(BaseModel):
    model_config = {"frozen": True}

    uuid: str
    rank: str
    online: Optional[bool] = None
