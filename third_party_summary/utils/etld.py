from __future__ import annotations
from urllib.parse import urlsplit

import tldextract

from ..errors import MalformedURL

# Offline extractor: use the public suffix snapshot bundled with tldextract.
_EXTRACTOR = tldextract.TLDExtract(suffix_list_urls=())

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

def host(url: str) -> str:
    """Host component of `url`, keeping the port only when it is not the scheme default."""
    try:
        parts = urlsplit(url)
        h = parts.hostname
        port = parts.port
    except ValueError as e:
        raise MalformedURL(url, str(e)) from e
    if not parts.scheme or not h:
        raise MalformedURL(url, "no host component")
    h = h.lower()
    if ":" in h:
        h = f"[{h}]"
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme.lower()):
        return f"{h}:{port}"
    return h

def etld1(host_or_url: str) -> str:
    """Registrable domain (eTLD+1) for a host or URL; IP literals come back unchanged."""
    h = host_or_url
    if "://" in host_or_url:
        h = host(host_or_url)
    h = h.lower()
    if h.startswith("["):
        return h
    h = h.split(":")[0]
    if not h:
        raise MalformedURL(host_or_url, "empty host")

    ext = _EXTRACTOR(h)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return h
