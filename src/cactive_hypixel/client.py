"""
HypixelClient / AsyncHypixelClient — main SDK clients.
"""

import asyncio
from typing import Any, Optional, Union

import httpx

from cactive_hypixel.transport.http import HttpClient, DEFAULT_BASE_URL, QueryParams
from cactive_hypixel.transport.envelope import decode_envelope
from cactive_hypixel.models.key import KeyInfo
from cactive_hypixel.models.player import NicknameHistoryEntry, PlayerProfile, PunishmentRecord
from cactive_hypixel.models.staff import StaffFilter, StaffPresenceEntry


class AsyncHypixelClient:
    """Async Cactive Hypixel API client (primary).

    Every lookup performs exactly one GET and either returns the typed
    payload or raises a HypixelAPIError whose ``errors`` list holds the
    normalized failures.
    """

    def __init__(
        self,
        api_key: str,
        prefer_cache: bool = False,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._prefer_cache = prefer_cache
        self.http = HttpClient(base_url=base_url, timeout=timeout, transport=transport)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def prefer_cache(self) -> bool:
        return self._prefer_cache

    def _auth_params(self) -> list[tuple[str, str]]:
        # cache is forwarded to the service, never evaluated here
        return [("key", self._api_key), ("cache", "true" if self._prefer_cache else "false")]

    def build_url(self, path: str, params: QueryParams) -> str:
        return self.http.url(path, params)

    async def _request(self, path: str, params: QueryParams, payload_type: Any) -> Any:
        body = await self.http.get(path, params)
        return decode_envelope(body, payload_type)

    async def nickname_history(self, nickname: str) -> list[NicknameHistoryEntry]:
        """Nicknames ever used by the player currently or previously named ``nickname``, oldest first."""
        return await self._request(
            "/nickname-history",
            [*self._auth_params(), ("nickname", nickname)],
            list[NicknameHistoryEntry],
        )

    async def player_data(self, uuid: str) -> PlayerProfile:
        """Nickname history, infractions, tracker and (key permitting) IP history of a player."""
        return await self._request("/player-data", [*self._auth_params(), ("uuid", uuid)], PlayerProfile)

    async def staff_tracker(self, filter: Optional[Union[StaffFilter, str]] = None) -> list[StaffPresenceEntry]:
        """Hypixel staff members, optionally filtered by "all", "online" or "offline"."""
        params = self._auth_params()
        if filter is not None:
            params.append(("filter", StaffFilter(filter).value))
        return await self._request("/staff-tracker", params, list[StaffPresenceEntry])

    async def punishment_data(self, id: str) -> PunishmentRecord:
        """Look up a punishment by its ID (e.g. "C256D602")."""
        # The service serves punishments from the staff-tracker resource.
        return await self._request("/staff-tracker", [*self._auth_params(), ("id", id)], PunishmentRecord)

    async def key_data(self, key: Optional[str] = None) -> KeyInfo:
        """Introspect an API key. Defaults to the client's own key."""
        return await self._request("/key", [("key", key if key is not None else self._api_key)], KeyInfo)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncHypixelClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class HypixelClient:
    """Sync wrapper around AsyncHypixelClient. Runs the event loop internally."""

    def __init__(self, *args: Any, **kwargs: Any):
        self._async = AsyncHypixelClient(*args, **kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def api_key(self) -> str:
        return self._async.api_key

    @property
    def prefer_cache(self) -> bool:
        return self._async.prefer_cache

    def build_url(self, path: str, params: QueryParams) -> str:
        return self._async.build_url(path, params)

    def nickname_history(self, nickname: str) -> list[NicknameHistoryEntry]:
        return self._run(self._async.nickname_history(nickname))

    def player_data(self, uuid: str) -> PlayerProfile:
        return self._run(self._async.player_data(uuid))

    def staff_tracker(self, filter: Optional[Union[StaffFilter, str]] = None) -> list[StaffPresenceEntry]:
        return self._run(self._async.staff_tracker(filter))

    def punishment_data(self, id: str) -> PunishmentRecord:
        return self._run(self._async.punishment_data(id))

    def key_data(self, key: Optional[str] = None) -> KeyInfo:
        return self._run(self._async.key_data(key))

    def close(self) -> None:
        if self._loop.is_closed():
            return
        try:
            self._run(self._async.close())
        finally:
            self._loop.close()

    def __enter__(self) -> "HypixelClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
