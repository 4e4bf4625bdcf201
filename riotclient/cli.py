"""Look up a Riot account by Riot ID; the key comes from RIOT_API_KEY."""

from __future__ import annotations

import argparse
import logging
import os
import sys

import httpx

from .middleware import logging_middleware
from .riot import Region, RiotAPIClient, UnexpectedStatusError


def main(argv=None) -> int:
    """Print ``gameName#tagLine`` of the requested account."""
    parser = argparse.ArgumentParser(prog="riotclient")
    parser.add_argument("game_name", nargs="?", default="Ayato")
    parser.add_argument("tag_line", nargs="?", default="11235")
    parser.add_argument("--region", default=Region.EUROPE.value)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    client = RiotAPIClient(
        os.environ.get("RIOT_API_KEY", ""), middleware=[logging_middleware()]
    )
    try:
        account = client.get_account_v1_by_riot_id(
            Region(args.region), args.game_name, args.tag_line
        )
    except (httpx.HTTPError, UnexpectedStatusError, ValueError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"{account.game_name}#{account.tag_line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())