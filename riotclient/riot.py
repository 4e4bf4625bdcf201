"""Client for the Riot Games web API."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .base import BaseClient, QueryValues
from .schemas import AccountV1Account, AccountV1ActiveShard

DEFAULT_BASE_URL = "https://{region}.api.riotgames.com"
REGION_PLACEHOLDER = "{region}"


class Region(str, Enum):
    """Routing values of the Riot API."""

    AMERICAS = "americas"
    EUROPE = "europe"
    ASIA = "asia"
    SEA = "sea"
    ESPORTS = "esports"

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    ME1 = "me1"
    NA1 = "na1"
    OC1 = "oc1"
    TR1 = "tr1"
    RU = "ru"
    PH2 = "ph2"
    SG2 = "sg2"
    TH2 = "th2"
    TW2 = "tw2"
    VN2 = "vn2"


class UnexpectedStatusError(Exception):
    """Raised when the API answers with a status outside 2xx."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"unexpected HTTP status {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason


def expand_path(template: str, params: Mapping[str, str] | None) -> str:
    """Replace each ``{name}`` in ``template`` with its value; unknown ones stay."""
    if not params:
        return template
    for key, value in params.items():
        template = template.replace(f"{{{key}}}", value)
    return template


def _region_value(region: Region | str) -> str:
    return region.value if isinstance(region, Region) else region


class RiotAPIClient(BaseClient):
    """Riot API client; every request carries the API key."""

    def __init__(self, api_key: str, **kwargs: Any) -> None:
        base_url = kwargs.pop("base_url", DEFAULT_BASE_URL)
        headers = dict(kwargs.pop("default_headers", None) or {})
        headers["X-Riot-Token"] = api_key
        super().__init__(base_url, default_headers=headers, **kwargs)
        self._timeout: float | None = None

    def url_for(self, region: Region | str, path: str) -> str:
        """Return the full URL of ``path`` on the host serving ``region``."""
        return self.base_url.replace(REGION_PLACEHOLDER, _region_value(region)) + path

    def with_timeout(self, timeout: float) -> RiotAPIClient:
        """Return a copy whose requests use ``timeout`` seconds."""
        clone = copy.copy(self)
        clone._timeout = timeout
        return clone

    def invoke_json(
        self,
        region: Region | str,
        method: str,
        path_template: str,
        path_params: Mapping[str, str] | None = None,
        queries: QueryValues | None = None,
        headers: Mapping[str, str] | None = None,
        body: bytes | str | None = None,
    ) -> Any:
        """Send a request and return its decoded JSON body."""
        url = self.url_for(region, expand_path(path_template, path_params))
        response = self._send(method, url, body, headers, queries, timeout=self._timeout)
        if not response.is_success:
            raise UnexpectedStatusError(response.status_code, response.reason_phrase)
        return response.json()

    def get_account_v1_by_puuid(self, region: Region | str, puuid: str) -> AccountV1Account:
        """Look up an account by its PUUID."""
        data = self.invoke_json(
            region,
            "GET",
            "/riot/account/v1/accounts/by-puuid/{puuid}",
            {"puuid": puuid},
        )
        return AccountV1Account.from_dict(data)

    def get_account_v1_by_riot_id(
        self, region: Region | str, game_name: str, tag_line: str
    ) -> AccountV1Account:
        """Look up an account by game name and tag line."""
        data = self.invoke_json(
            region,
            "GET",
            "/riot/account/v1/accounts/by-riot-id/{game_name}/{tag_line}",
            {"game_name": game_name, "tag_line": tag_line},
        )
        return AccountV1Account.from_dict(data)

    def get_account_v1_me(self, region: Region | str, authorization: str) -> AccountV1Account:
        """Return the account that the given authorization belongs to."""
        data = self.invoke_json(
            region,
            "GET",
            "/riot/account/v1/accounts/me",
            headers={"Authorization": authorization},
        )
        return AccountV1Account.from_dict(data)

    def get_account_v1_active_shard_by_puuid(
        self, region: Region | str, puuid: str, game: str
    ) -> AccountV1ActiveShard:
        """Return the active shard of a player for a game."""
        data = self.invoke_json(
            region,
            "GET",
            "/riot/account/v1/active-shards/by-game/{game}/by-puuid/{puuid}",
            {"puuid": puuid, "game": game},
        )
        return AccountV1ActiveShard.from_dict(data)