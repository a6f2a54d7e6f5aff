#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

def _read_json(p: Path) -> dict[str, Any] | None:
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None

def main() -> None:
    ap = argparse.ArgumentParser(description="Build a compact Tracker Radar index used to label third-party entities.")
    ap.add_argument("--tracker-radar-dir", required=True, help="Path to a local clone of duckduckgo/tracker-radar")
    ap.add_argument("--out", required=True, help="Output JSON path")
    args = ap.parse_args()

    domains_dir = Path(args.tracker_radar_dir) / "domains"
    if not domains_dir.exists():
        raise SystemExit("Expected a 'domains/' directory. Did you clone tracker-radar?")

    out: dict[str, dict[str, Any]] = {}
    for p in domains_dir.rglob("*.json"):
        data = _read_json(p)
        if not data:
            continue

        dom = data.get("domain")
        if not isinstance(dom, str) or not dom.strip():
            dom = p.stem
        dom = dom.lower()

        owner = data.get("owner") if isinstance(data.get("owner"), dict) else {}
        entity = owner.get("displayName") or owner.get("name")
        if not isinstance(entity, str) or not entity.strip():
            entity = None

        categories = data.get("categories")
        if isinstance(categories, str):
            categories = [categories]
        if not isinstance(categories, list):
            categories = []

        out[dom] = {
            "entity": entity,
            "categories": [c for c in categories if isinstance(c, str)],
        }

    Path(args.out).write_text(json.dumps(out, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Wrote {len(out):,} domain entries to {args.out}")

if __name__ == "__main__":
    main()
