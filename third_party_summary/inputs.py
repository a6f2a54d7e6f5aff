"""Loaders for pre-computed network records and main-thread tasks.

Both files are either a JSON array or JSONL (one object per line). Keys are
accepted in camelCase, as the browser tooling emits them, or snake_case.
"""
from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from .errors import InputFormatError
from .models import NetworkRecord, Task
from .utils.io import iter_jsonl, read_json

def _first(obj: dict[str, Any], *keys: str) -> Any:
    for k in keys:
        if k in obj and obj[k] is not None:
            return obj[k]
    return None

def _non_negative_number(v: Any) -> bool:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return math.isfinite(v) and v >= 0

def _load_objects(path: str | Path) -> list[dict[str, Any]]:
    p = Path(path)
    try:
        if p.suffix == ".jsonl":
            data: Any = list(iter_jsonl(p))
        else:
            data = read_json(p)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InputFormatError(f"Cannot read {p}: {e}") from e

    if isinstance(data, dict):
        # Allow {"networkRecords": [...]} / {"tasks": [...]} wrappers.
        for k in ("networkRecords", "network_records", "records", "tasks", "items"):
            if isinstance(data.get(k), list):
                data = data[k]
                break
    if not isinstance(data, list):
        raise InputFormatError(f"{p}: expected a list of objects")
    for i, obj in enumerate(data):
        if not isinstance(obj, dict):
            raise InputFormatError(f"{p}: entry {i} is not an object")
    return data

def network_record_from_obj(obj: dict[str, Any]) -> NetworkRecord:
    url = obj.get("url")
    if not isinstance(url, str) or not url:
        raise InputFormatError(f"Network record without url: {obj!r}")
    size = _first(obj, "transferSize", "transfer_size") or 0
    if not _non_negative_number(size) or not float(size).is_integer():
        raise InputFormatError(f"Invalid transfer size for {url}: {size!r}")
    resource_type = _first(obj, "resourceType", "resource_type")
    return NetworkRecord(url=url, transfer_size=int(size), resource_type=resource_type)

def task_from_obj(obj: dict[str, Any]) -> Task:
    self_time = _first(obj, "selfTime", "self_time")
    if not _non_negative_number(self_time):
        raise InputFormatError(f"Invalid task self time: {obj!r}")
    urls = _first(obj, "attributableURLs", "attributableUrls", "attributable_urls")
    if urls is None:
        single = obj.get("url")
        urls = [single] if single else []
    if not isinstance(urls, list) or not all(isinstance(u, str) for u in urls):
        raise InputFormatError(f"Invalid attributable URLs: {urls!r}")
    name = _first(obj, "name", "eventName")
    return Task(self_time=float(self_time), attributable_urls=tuple(urls), name=name)

def load_network_records(path: str | Path) -> list[NetworkRecord]:
    return [network_record_from_obj(o) for o in _load_objects(path)]

def load_tasks(path: str | Path) -> list[Task]:
    return [task_from_obj(o) for o in _load_objects(path)]
