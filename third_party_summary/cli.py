from __future__ import annotations

import argparse

from .audit import audit
from .config import PASS_THRESHOLD_IN_MS, THROTTLING_METHODS, AuditSettings
from .entities import GROUPINGS, resolver_for
from .errors import AttributionError, InputFormatError
from .inputs import load_network_records, load_tasks
from .report import build_human_report, build_machine_report
from .tracker_radar import TrackerRadarIndex
from .utils.io import write_json
from .utils.logging import log, warn


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="third-party-summary",
        description="Attribute transfer bytes and main-thread blocking time of a page load to third-party entities.",
    )
    src = p.add_argument_group("Inputs")
    src.add_argument("--network", type=str, required=True, help="Network records (JSON array or JSONL): url, transferSize, resourceType.")
    src.add_argument("--tasks", type=str, default=None, help="Main-thread tasks (JSON array or JSONL): selfTime, attributableURLs, name.")
    src.add_argument("--final-url", type=str, required=True, help="Final URL of the page under test; its entity is treated as first party.")

    thr = p.add_argument_group("Throttling")
    thr.add_argument("--throttling-method", type=str, default="simulate", choices=list(THROTTLING_METHODS), help="Task times are only scaled under 'simulate'. Default: simulate")
    thr.add_argument("--cpu-slowdown", type=float, default=4.0, help="CPU slowdown multiplier used when simulating. Default: 4")

    grp = p.add_argument_group("Attribution")
    grp.add_argument("--group-by", type=str, default="host", choices=sorted(GROUPINGS), help="Entity grouping: URL host or registrable domain (eTLD+1). Default: host")
    grp.add_argument("--tracker-radar-index", type=str, default=None, help="Optional tracker_radar_index.json to label entities with their owner.")
    grp.add_argument("--skip-malformed", action="store_true", help="Skip URLs without a host instead of aborting (totals then exclude them).")
    grp.add_argument("--pass-threshold-ms", type=float, default=PASS_THRESHOLD_IN_MS, help=f"Blocking time budget for a pass. Default: {PASS_THRESHOLD_IN_MS}")

    out = p.add_argument_group("Output")
    out.add_argument("--out", type=str, required=True, help="Output JSON path for the audit payload.")
    out.add_argument("--text", action="store_true", help="Also log a plain-text summary of the top entities.")

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        settings = AuditSettings(
            throttling_method=args.throttling_method,
            cpu_slowdown_multiplier=args.cpu_slowdown,
            pass_threshold_ms=args.pass_threshold_ms,
            on_malformed="skip" if args.skip_malformed else "raise",
        )
        records = load_network_records(args.network)
        tasks = load_tasks(args.tasks) if args.tasks else []
        tracker_radar = TrackerRadarIndex.load(args.tracker_radar_index) if args.tracker_radar_index else None
    except (InputFormatError, ValueError, OSError) as e:
        warn(str(e))
        raise SystemExit(2)

    log(f"Loaded {len(records)} network records and {len(tasks)} tasks.")
    if tracker_radar is not None:
        log(f"Tracker Radar index: {len(tracker_radar)} domains.")

    try:
        result = audit(
            records,
            tasks,
            args.final_url,
            settings,
            entity_of=resolver_for(args.group_by),
            tracker_radar=tracker_radar,
        )
    except AttributionError as e:
        warn(f"Attribution failed: {e}")
        raise SystemExit(2)

    payload = build_machine_report(result, final_url=args.final_url)
    write_json(args.out, payload)
    log(f"Wrote {len(result.rows)} third-party rows to {args.out}")

    if args.text:
        log("\n" + build_human_report(result))


if __name__ == "__main__":
    main()
