"""Per-entity drill-down rows."""
from __future__ import annotations

from .config import MAX_SUBITEMS, MIN_TRANSFER_SIZE_FOR_SUBITEMS
from .models import OTHER_RESOURCES_LABEL, CostSummary, SubItem, Summaries


def select_sub_items(entity: str, summaries: Summaries, stats: CostSummary) -> list[SubItem]:
    """Most significant URLs of `entity`, plus an "Other resources" remainder row.

    URLs are ranked by blocking time, then bytes. Selection stops at the first
    URL with no blocking time whose size is under the relevance floor
    (4 KiB, or 5% of the entity's bytes when that is larger). Returns an
    empty list when nothing qualifies.
    """
    items: list[SubItem] = []
    for url in summaries.urls_by_entity.get(entity, []):
        s = summaries.by_url[url]
        if s.transfer_size > 0:
            items.append(SubItem(url=url, transfer_size=s.transfer_size, blocking_time=s.blocking_time))
    items.sort(key=lambda i: (-i.blocking_time, -i.transfer_size))

    min_transfer_size = max(MIN_TRANSFER_SIZE_FOR_SUBITEMS, stats.transfer_size / 20)
    selected_bytes = 0
    selected_blocking = 0.0
    num_sub_items = 0
    for item in items[:MAX_SUBITEMS]:
        if item.blocking_time == 0 and item.transfer_size < min_transfer_size:
            break
        num_sub_items += 1
        selected_bytes += item.transfer_size
        selected_blocking += item.blocking_time

    if not selected_bytes and not selected_blocking:
        return []

    items = items[:num_sub_items]
    remainder = SubItem(
        url=OTHER_RESOURCES_LABEL,
        transfer_size=stats.transfer_size - selected_bytes,
        blocking_time=stats.blocking_time - selected_blocking,
        is_remainder=True,
    )
    if remainder.transfer_size > min_transfer_size:
        items.append(remainder)
    return items
