from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import MalformedURL
from .utils.etld import etld1

@dataclass
class TrackerRadarEntry:
    etld1: str
    entity: str | None
    categories: list[str]

class TrackerRadarIndex:
    """
    Owner lookup for report rows, backed by a compact JSON index built from a
    local clone of duckduckgo/tracker-radar.

    Index format:
      {
        "<etld1>": {
          "entity": "...",
          "categories": [...]
        },
        ...
      }
    """
    def __init__(self, data: dict[str, dict[str, Any]]) -> None:
        self._data = {k.lower(): v for k, v in data.items()}

    @classmethod
    def load(cls, index_path: str | Path) -> TrackerRadarIndex:
        p = Path(index_path)
        return cls(json.loads(p.read_text(encoding="utf-8")))

    def __len__(self) -> int:
        return len(self._data)

    def lookup(self, host_or_domain: str) -> TrackerRadarEntry | None:
        try:
            key = etld1(host_or_domain)
        except MalformedURL:
            return None
        rec = self._data.get(key)
        if not rec:
            return None
        categories = rec.get("categories") or []
        if isinstance(categories, str):
            categories = [categories]
        return TrackerRadarEntry(
            etld1=key,
            entity=rec.get("entity"),
            categories=[c for c in categories if isinstance(c, str)],
        )
