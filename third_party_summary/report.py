"""Machine + human renderings of an audit result."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from .models import AuditResult

AUDIT_ID = "third-party-summary"


def build_table_details(result: AuditResult) -> dict[str, Any]:
    return {
        "type": "table",
        "headings": result.headings,
        "items": [row.to_dict() for row in result.rows],
        "summary": result.overall.to_dict(),
    }


def build_machine_report(result: AuditResult, *, final_url: str | None = None) -> dict[str, Any]:
    """Return the audit payload with camelCase keys, ready for a report renderer."""
    payload: dict[str, Any] = {
        "id": AUDIT_ID,
        "generatedAt": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "finalUrl": final_url,
        "firstPartyEntity": result.first_party_entity,
        "cpuMultiplier": result.cpu_multiplier,
        **result.verdict.to_dict(),
    }
    if not result.verdict.not_applicable:
        payload["details"] = build_table_details(result)
    return payload


def _fmt_bytes(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    return f"{n / 1024:,.1f} KiB"


def build_human_report(result: AuditResult, *, max_rows: int = 10) -> str:
    """Return a short text summary of the most expensive third parties."""
    verdict = result.verdict
    if verdict.not_applicable:
        return "No third-party cost observed."

    status = "PASS" if verdict.score else "FAIL"
    lines = [
        f"{status}: {verdict.display_value}",
        f"Total third-party transfer: {_fmt_bytes(result.overall.wasted_bytes)}",
    ]
    for idx, row in enumerate(result.rows[:max_rows], start=1):
        label = row.entity
        if row.entity_name:
            label += f" ({row.entity_name})"
        lines.append(f"{idx}. {label}: {_fmt_bytes(row.transfer_size)}, {row.blocking_time:,.0f} ms blocking")
        for item in row.sub_items:
            lines.append(f"   - {item.url}: {_fmt_bytes(item.transfer_size)}, {item.blocking_time:,.0f} ms")
    if len(result.rows) > max_rows:
        lines.append(f"... {len(result.rows) - max_rows} more")
    return "\n".join(lines)
