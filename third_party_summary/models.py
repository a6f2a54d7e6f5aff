"""Data contracts for third-party cost attribution.

Network records and tasks are supplied by the host already computed;
everything else is derived fresh on every audit run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Tasks with no attributable URL are folded into one of these buckets, chosen
# by trace event name. A bucket is never parsed as a URL, is its own entity,
# and is never reported as a third party.
UNATTRIBUTED_URL = "Unattributable"
UNATTRIBUTED_ENTITY = UNATTRIBUTED_URL
BROWSER_URL = "Browser"
BROWSER_GC_URL = "Browser GC"
NON_URL_BUCKETS = frozenset({UNATTRIBUTED_URL, BROWSER_URL, BROWSER_GC_URL})

OTHER_RESOURCES_LABEL = "Other resources"


@dataclass(frozen=True)
class NetworkRecord:
    url: str
    transfer_size: int = 0
    resource_type: str | None = None  # "Script" marks a JavaScript URL


@dataclass(frozen=True)
class Task:
    self_time: float  # ms, before CPU throttling is applied
    attributable_urls: tuple[str, ...] = ()
    name: str | None = None


@dataclass
class CostSummary:
    transfer_size: int = 0
    main_thread_time: float = 0.0
    blocking_time: float = 0.0

    def add(self, other: CostSummary) -> None:
        self.transfer_size += other.transfer_size
        self.main_thread_time += other.main_thread_time
        self.blocking_time += other.blocking_time


@dataclass
class Summaries:
    by_url: dict[str, CostSummary] = field(default_factory=dict)
    by_entity: dict[str, CostSummary] = field(default_factory=dict)
    urls_by_entity: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class SubItem:
    url: str
    transfer_size: int
    blocking_time: float
    is_remainder: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "transferSize": self.transfer_size,
            "blockingTime": self.blocking_time,
        }


@dataclass
class ReportRow:
    entity: str
    transfer_size: int
    blocking_time: float
    main_thread_time: float
    sub_items: list[SubItem] = field(default_factory=list)
    entity_name: str | None = None
    categories: list[str] = field(default_factory=list)

    @property
    def entity_link(self) -> dict[str, str]:
        return {"type": "link", "text": self.entity, "url": self.entity or ""}

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "mainThreadTime": self.main_thread_time,
            "blockingTime": self.blocking_time,
            "transferSize": self.transfer_size,
            "entity": self.entity_link,
            "subItems": {
                "type": "subitems",
                "items": [item.to_dict() for item in self.sub_items],
            },
        }
        if self.entity_name:
            out["entityName"] = self.entity_name
        if self.categories:
            out["categories"] = list(self.categories)
        return out


@dataclass
class OverallSummary:
    wasted_bytes: int = 0
    wasted_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"wastedBytes": self.wasted_bytes, "wastedMs": self.wasted_ms}


@dataclass(frozen=True)
class Verdict:
    score: int
    not_applicable: bool = False
    display_value_ms: float = 0.0

    @property
    def display_value(self) -> str | None:
        if self.not_applicable:
            return None
        return f"Third-party code blocked the main thread for {self.display_value_ms:,.0f} ms"

    def to_dict(self) -> dict[str, Any]:
        if self.not_applicable:
            return {"score": self.score, "notApplicable": True}
        return {
            "score": self.score,
            "displayValueMs": self.display_value_ms,
            "displayValue": self.display_value,
        }


@dataclass
class AssembledReport:
    rows: list[ReportRow]
    overall: OverallSummary
    verdict: Verdict


@dataclass
class AuditResult:
    verdict: Verdict
    headings: list[dict[str, Any]]
    rows: list[ReportRow]
    overall: OverallSummary
    first_party_entity: str | None
    cpu_multiplier: float
