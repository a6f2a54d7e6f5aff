"""Per-URL and per-entity cost aggregation."""
from __future__ import annotations

from typing import Iterable

from .attribution import Attributor, attributable_url_for_task, get_javascript_urls, unattributed_bucket
from .config import BLOCKING_TIME_ALLOWANCE_MS, MalformedPolicy
from .entities import EntityResolver
from .errors import MalformedURL
from .models import (
    NON_URL_BUCKETS,
    CostSummary,
    NetworkRecord,
    Summaries,
    Task,
)
from .utils.etld import host
from .utils.logging import warn


def blocking_time(task_duration: float) -> float:
    return max(task_duration - BLOCKING_TIME_ALLOWANCE_MS, 0)


def summarize(
    network_records: Iterable[NetworkRecord],
    tasks: Iterable[Task],
    cpu_multiplier: float,
    *,
    attribute: Attributor = attributable_url_for_task,
    entity_of: EntityResolver = host,
    on_malformed: MalformedPolicy = "raise",
) -> Summaries:
    """Fold network records and main-thread tasks into per-URL and per-entity totals.

    Task self times are scaled by `cpu_multiplier` before being counted; only
    the part of each scaled task beyond the 50 ms allowance counts as
    blocking time.

    With `on_malformed="raise"` (the default) a URL without a host aborts the
    whole pass with MalformedURL. With `"skip"` the URL is reported through
    `warn` and dropped from the result, so entity totals no longer add
    up to the input totals.
    """
    records = list(network_records)
    by_url: dict[str, CostSummary] = {}

    for record in records:
        url_summary = by_url.setdefault(record.url, CostSummary())
        url_summary.transfer_size += record.transfer_size

    js_urls = get_javascript_urls(records)

    for task in tasks:
        url = attribute(task, js_urls) or unattributed_bucket(task)
        url_summary = by_url.setdefault(url, CostSummary())
        duration = task.self_time * cpu_multiplier
        url_summary.main_thread_time += duration
        url_summary.blocking_time += blocking_time(duration)

    summaries = Summaries(by_url=by_url)
    for url, url_summary in list(by_url.items()):
        if url in NON_URL_BUCKETS:
            entity = url
        else:
            try:
                entity = entity_of(url)
            except MalformedURL as e:
                if on_malformed != "skip":
                    raise
                warn(f"Skipping {url!r}: {e}")
                del by_url[url]
                continue

        summaries.by_entity.setdefault(entity, CostSummary()).add(url_summary)
        summaries.urls_by_entity.setdefault(entity, []).append(url)

    return summaries
