from __future__ import annotations


class AttributionError(ValueError):
    """Raised when a record or task cannot be attributed to an entity."""


class MalformedURL(AttributionError):
    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        self.reason = reason
        msg = f"Cannot resolve a host for URL: {url!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InputFormatError(ValueError):
    """Raised when a network-record or task file cannot be loaded."""
