"""Response payloads of the Riot API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _strings(data: Any, *keys: str) -> list[str]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    values = [data.get(key) or "" for key in keys]
    for key, value in zip(keys, values):
        if not isinstance(value, str):
            raise TypeError(f"field {key!r} must be a string")
    return values


@dataclass(frozen=True)
class AccountV1Account:
    puuid: str = ""
    game_name: str = ""
    tag_line: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AccountV1Account:
        return cls(*_strings(data, "puuid", "gameName", "tagLine"))


@dataclass(frozen=True)
class AccountV1ActiveShard:
    puuid: str = ""
    game: str = ""
    active_shard: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AccountV1ActiveShard:
        return cls(*_strings(data, "puuid", "game", "activeShard"))