"""Attribute page-load cost to third-party entities."""

from .attribution import attributable_url_for_task, fixed_url, get_javascript_urls
from .audit import TABLE_HEADINGS, assemble, audit
from .config import AuditSettings
from .errors import AttributionError, InputFormatError, MalformedURL
from .models import (
    AuditResult,
    CostSummary,
    NetworkRecord,
    OverallSummary,
    ReportRow,
    SubItem,
    Summaries,
    Task,
    Verdict,
)
from .subitems import select_sub_items
from .summaries import summarize

__all__ = [
    "AttributionError",
    "AuditResult",
    "AuditSettings",
    "CostSummary",
    "InputFormatError",
    "MalformedURL",
    "NetworkRecord",
    "OverallSummary",
    "ReportRow",
    "SubItem",
    "Summaries",
    "TABLE_HEADINGS",
    "Task",
    "Verdict",
    "assemble",
    "attributable_url_for_task",
    "audit",
    "fixed_url",
    "get_javascript_urls",
    "select_sub_items",
    "summarize",
]
