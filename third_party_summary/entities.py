"""URL → entity strategies used to group per-URL costs."""
from __future__ import annotations

from typing import Callable

from .utils.etld import etld1, host

EntityResolver = Callable[[str], str]


def etld1_of_url(url: str) -> str:
    # Parse as a URL first so hostless inputs raise MalformedURL instead of
    # being read as bare hosts.
    return etld1(host(url))


GROUPINGS: dict[str, EntityResolver] = {
    "host": host,
    "etld1": etld1_of_url,
}


def resolver_for(grouping: str) -> EntityResolver:
    try:
        return GROUPINGS[grouping]
    except KeyError:
        raise ValueError(f"Unknown entity grouping: {grouping!r} (expected one of {sorted(GROUPINGS)})") from None
