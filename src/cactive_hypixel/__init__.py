"""
cactive-hypixel-api — Cactive Hypixel API client for Python.

Typed REST client for https://hypixel.cactive.network: nickname history,
player data, staff tracker, punishments and API key introspection.
"""

from cactive_hypixel.client import HypixelClient, AsyncHypixelClient
from cactive_hypixel.errors import HypixelAPIError, TransportError, DecodeError, APIResponseError
from cactive_hypixel.models.envelope import ApiError, Envelope, NormalizedError
from cactive_hypixel.models.key import KeyEndpoint, KeyInfo
from cactive_hypixel.models.player import (
    NicknameHistoryEntry,
    PlayerInfraction,
    PlayerIPHistoryEntry,
    PlayerNickname,
    PlayerProfile,
    PlayerTracker,
    PunishmentRecord,
)
from cactive_hypixel.models.staff import StaffFilter, StaffPresenceEntry

__version__ = "0.1.0"
__all__ = [
    "HypixelClient",
    "AsyncHypixelClient",
    "HypixelAPIError",
    "TransportError",
    "DecodeError",
    "APIResponseError",
    "ApiError",
    "Envelope",
    "NormalizedError",
    "KeyEndpoint",
    "KeyInfo",
    "NicknameHistoryEntry",
    "PlayerInfraction",
    "PlayerIPHistoryEntry",
    "PlayerNickname",
    "PlayerProfile",
    "PlayerTracker",
    "PunishmentRecord",
    "StaffFilter",
    "StaffPresenceEntry",
]
