# riotclient

A small HTTP client for the Riot Games API, built on `httpx`.

It provides:

- `riotclient.base.BaseClient`: a general HTTP client with a base URL,
  default headers, default query parameters and a chain of request
  middleware.
- `riotclient.riot.RiotAPIClient`: a client for the Riot API that sends
  your key in the `X-Riot-Token` header, puts the region into the host name
  and decodes JSON responses into records.
- `riotclient.middleware.logging_middleware`: a middleware that logs each
  request and the status of its response.
- A `riotclient` command that looks up one account by Riot ID.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Looking up an account

```python
from riotclient.riot import Region, RiotAPIClient, UnexpectedStatusError

client = RiotAPIClient(api_key="placeholder")

try:
    account = client.get_account_v1_by_riot_id(Region.EUROPE, "Ayato", "11235")
except UnexpectedStatusError as exc:
    print("request failed:", exc.status_code, exc.reason)
else:
    print(f"{account.game_name}#{account.tag_line}")
```

`Region` holds the routing values of the Riot API (`americas`, `europe`,
`asia`, `sea`, `esports`) and the platform values (`br1`, `eun1`, `euw1`,
`jp1`, `kr`, `la1`, `la2`, `me1`, `na1`, `oc1`, `tr1`, `ru`, `ph2`, `sg2`,
`th2`, `tw2`, `vn2`). A plain string is accepted too. The region replaces
`{region}` in the base URL, which defaults to
`https://{region}.api.riotgames.com`; `url_for(region, path)` returns the
resulting URL.

The Account-V1 endpoints are:

| Method | Endpoint |
| --- | --- |
| `get_account_v1_by_puuid(region, puuid)` | `/riot/account/v1/accounts/by-puuid/{puuid}` |
| `get_account_v1_by_riot_id(region, game_name, tag_line)` | `/riot/account/v1/accounts/by-riot-id/{game_name}/{tag_line}` |
| `get_account_v1_me(region, authorization)` | `/riot/account/v1/accounts/me` (sends the `Authorization` header) |
| `get_account_v1_active_shard_by_puuid(region, puuid, game)` | `/riot/account/v1/active-shards/by-game/{game}/by-puuid/{puuid}` |

The first three return an `AccountV1Account` (`puuid`, `game_name`,
`tag_line`), the last an `AccountV1ActiveShard` (`puuid`, `game`,
`active_shard`); both live in `riotclient.schemas` and are built with
`from_dict` from the JSON object the API returns. A response outside the
2xx range raises `UnexpectedStatusError`.

Other endpoints can be called with `invoke_json`, which fills in the path
template with `expand_path`, sends the request and returns the decoded JSON:

```python
data = client.invoke_json(
    Region.EUW1,
    "GET",
    "/some/path/{id}",
    path_params={"id": "42"},
    queries={"count": "5"},
)
```

`expand_path(template, params)` replaces each `{name}` that has a value
and leaves the others as they are.

`with_timeout(seconds)` returns a copy of the client whose requests use that
timeout; the original is unchanged. The default timeout is 10 seconds.

## The base client

```python
from riotclient.base import BaseClient

client = BaseClient(
    "https://api.example.com",
    default_headers={"Accept": "application/json"},
    default_queries={"lang": "en"},
)
response = client.invoke("GET", "/items", queries={"page": ["1", "2"]})
```

`invoke(method, path, body, headers, queries)` returns the `httpx.Response`.
`path` is appended to the base URL unless it is an absolute `http://` or
`https://` URL. Default and per-call query parameters are merged and
encoded sorted by name; per-call headers override default ones. A custom
`httpx.Client` can be passed as `http_client`.

## Middleware

A middleware takes the next request handler (a function from
`httpx.Request` to `httpx.Response`) and returns a new one that may change
the request, log it or inspect the response. Middleware registered first
runs first.

```python
import logging

from riotclient.middleware import logging_middleware
from riotclient.riot import RiotAPIClient

logging.basicConfig(level=logging.INFO)

client = RiotAPIClient(
    api_key="placeholder",
    middleware=[logging_middleware(logging.getLogger("riot"))],
)
```

`logging_middleware` logs at INFO level to the given logger, or to the
`riotclient` logger when none is given. `apply_middleware(handler,
middlewares)` builds such a chain around any handler, and
`BaseClient.add_middleware` appends one to an existing client.

## Command line

The `riotclient` command reads the API key from the `RIOT_API_KEY`
environment variable, looks up a Riot ID and prints it as `name#tag`,
logging the request as it goes:

```
RIOT_API_KEY=placeholder riotclient Ayato 11235 --region europe
```

Game name and tag line default to `Ayato` and `11235`, the region to
`europe`. On a failed request or an unknown region it prints
`error: ...` to standard error and exits with status 1.

## Limits

Only the Account-V1 endpoints have their own methods and response records;
anything else must go through `invoke_json`. The client is synchronous,
and it does not retry requests or handle rate limits.