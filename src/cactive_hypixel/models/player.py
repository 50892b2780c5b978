"""
Player models — /nickname-history, /player-data and punishment lookups.
"""

from typing import Optional
from pydantic import BaseModel, Field


class NicknameHistoryEntry(BaseModel):
    """/nickname-history list item"""
    model_config = {"frozen": True}

    uuid: str
    nickname: str
    active: bool
    created_at: str
    voided_at: Optional[str] = None


class PunishmentRecord(BaseModel):
    """Punishment lookup payload"""
    model_config = {"frozen": True}

    id: str
    punishment_type: str
    uuid: str
    executor: Optional[str] = None
    reason: str
    length: Optional[int] = Field(default=None, ge=0)


class PlayerNickname(BaseModel):
    model_config = {"frozen": True}

    nickname: str
    active: Optional[bool] = None
    created_at: str
    voided_at: Optional[str] = None


class PlayerInfraction(BaseModel):
    model_config = {"frozen": True}

    id: str
    punishment_type: str
    executor: Optional[str] = None
    reason: str
    length: Optional[int] = Field(default=None, ge=0)


class PlayerTracker(BaseModel):
    """Last known presence of the player on the network."""
    model_config = {"frozen": True}

    server: Optional[str] = None
    map: Optional[str] = None
    proxy: Optional[str] = None
    last_login: Optional[str] = None


class PlayerIPHistoryEntry(BaseModel):
    model_config = {"frozen": True}

    ip: str
    login_at: str
    logout_at: Optional[str] = None
    connection_proxy: Optional[str] = None


class PlayerProfile(BaseModel):
    """/player-data payload"""
    model_config = {"frozen": True}

    uuid: str
    nickname_history: list[PlayerNickname]
    infractions: list[PlayerInfraction]
    tracker: PlayerTracker
    ip_history: Optional[list[PlayerIPHistoryEntry]] = None  # only for keys with IP access
