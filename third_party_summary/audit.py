"""Ranking, first-party exclusion and the pass/fail verdict."""
from __future__ import annotations

import copy
from typing import Iterable

from .attribution import Attributor, attributable_url_for_task
from .config import PASS_THRESHOLD_IN_MS, AuditSettings
from .entities import EntityResolver
from .models import (
    NON_URL_BUCKETS,
    AssembledReport,
    AuditResult,
    NetworkRecord,
    OverallSummary,
    ReportRow,
    Summaries,
    Task,
    Verdict,
)
from .subitems import select_sub_items
from .summaries import summarize
from .tracker_radar import TrackerRadarIndex
from .utils.etld import host

TABLE_HEADINGS: list[dict] = [
    {
        "key": "entity",
        "itemType": "link",
        "text": "Third-Party",
        "subItemsHeading": {"key": "url", "itemType": "url"},
    },
    {
        "key": "transferSize",
        "granularity": 1,
        "itemType": "bytes",
        "text": "Transfer Size",
        "subItemsHeading": {"key": "transferSize"},
    },
    {
        "key": "blockingTime",
        "granularity": 1,
        "itemType": "ms",
        "text": "Main-Thread Blocking Time",
        "subItemsHeading": {"key": "blockingTime"},
    },
]


def _row_sort_key(row: ReportRow) -> tuple[float, int]:
    return (-row.blocking_time, -row.transfer_size)


def assemble(
    summaries: Summaries,
    first_party_entity: str | None,
    pass_threshold_ms: float = PASS_THRESHOLD_IN_MS,
    *,
    tracker_radar: TrackerRadarIndex | None = None,
) -> AssembledReport:
    overall = OverallSummary()
    rows: list[ReportRow] = []

    for entity, stats in summaries.by_entity.items():
        if entity in NON_URL_BUCKETS:
            continue
        if first_party_entity and entity == first_party_entity:
            continue

        overall.wasted_bytes += stats.transfer_size
        overall.wasted_ms += stats.blocking_time

        row = ReportRow(
            entity=entity,
            transfer_size=stats.transfer_size,
            blocking_time=stats.blocking_time,
            main_thread_time=stats.main_thread_time,
            sub_items=select_sub_items(entity, summaries, stats),
        )
        if tracker_radar is not None:
            entry = tracker_radar.lookup(entity)
            if entry:
                row.entity_name = entry.entity
                row.categories = entry.categories
        rows.append(row)

    rows.sort(key=_row_sort_key)

    if not rows:
        verdict = Verdict(score=1, not_applicable=True)
    else:
        verdict = Verdict(
            score=int(overall.wasted_ms <= pass_threshold_ms),
            display_value_ms=overall.wasted_ms,
        )
    return AssembledReport(rows=rows, overall=overall, verdict=verdict)


def audit(
    network_records: Iterable[NetworkRecord],
    tasks: Iterable[Task],
    final_url: str | None,
    settings: AuditSettings | None = None,
    *,
    attribute: Attributor = attributable_url_for_task,
    entity_of: EntityResolver = host,
    tracker_radar: TrackerRadarIndex | None = None,
) -> AuditResult:
    """Attribute load cost to third-party entities for one page load.

    `final_url` identifies the first party; its entity (resolved with the
    same `entity_of` used for grouping) is left out of the report. A page
    whose only cost is first-party, or that has no cost at all, yields a
    not-applicable verdict.
    """
    settings = settings or AuditSettings()
    multiplier = settings.cpu_multiplier
    first_party = entity_of(final_url) if final_url else None

    summaries = summarize(
        network_records,
        tasks,
        multiplier,
        attribute=attribute,
        entity_of=entity_of,
        on_malformed=settings.on_malformed,
    )
    report = assemble(
        summaries,
        first_party,
        settings.pass_threshold_ms,
        tracker_radar=tracker_radar,
    )
    return AuditResult(
        verdict=report.verdict,
        headings=copy.deepcopy(TABLE_HEADINGS),
        rows=report.rows,
        overall=report.overall,
        first_party_entity=first_party,
        cpu_multiplier=multiplier,
    )
