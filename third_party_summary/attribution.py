"""Task → URL attribution strategies.

An attributor receives a main-thread task plus the set of URLs known to
serve JavaScript and returns the URL responsible for the task, or None when
nothing can be blamed.
"""
from __future__ import annotations

from typing import Callable, Iterable

from .models import BROWSER_GC_URL, BROWSER_URL, UNATTRIBUTED_URL, NetworkRecord, Task

Attributor = Callable[[Task, set[str]], str | None]

SCRIPT_RESOURCE_TYPE = "Script"
_NON_URLS = {"", "about:blank"}

BROWSER_TASK_NAMES = frozenset({"CpuProfiler::StartProfiling"})
BROWSER_GC_TASK_NAMES = frozenset({"V8.GCCompactor", "MajorGC", "MinorGC"})


def get_javascript_urls(records: Iterable[NetworkRecord]) -> set[str]:
    return {r.url for r in records if r.resource_type == SCRIPT_RESOURCE_TYPE}


def attributable_url_for_task(task: Task, js_urls: set[str]) -> str | None:
    """Prefer the first stack URL that is a known script, else the first stack URL."""
    urls = [u for u in task.attributable_urls if u not in _NON_URLS]
    if not urls:
        return None
    for url in urls:
        if url in js_urls:
            return url
    return urls[0]


def unattributed_bucket(task: Task) -> str:
    """Bucket for a task no URL could be blamed for; browser and GC work get their own."""
    if task.name in BROWSER_TASK_NAMES:
        return BROWSER_URL
    if task.name in BROWSER_GC_TASK_NAMES:
        return BROWSER_GC_URL
    return UNATTRIBUTED_URL


def fixed_url(url: str | None) -> Attributor:
    """Attributor that blames every task on `url`. Handy for synthetic traces."""
    def _attribute(task: Task, js_urls: set[str]) -> str | None:
        return url
    return _attribute
