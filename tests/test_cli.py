import json
from pathlib import Path

import pytest

from third_party_summary.cli import main


def _write(p: Path, obj) -> str:
    p.write_text(json.dumps(obj), encoding="utf-8")
    return str(p)


def test_cli_writes_audit_payload(tmp_path: Path, capsys):
    network = _write(tmp_path / "network.json", [
        {"url": "https://b.com/", "transferSize": 20000},
        {"url": "https://a.com/x.js", "transferSize": 10000, "resourceType": "Script"},
    ])
    tasks = _write(tmp_path / "tasks.json", [
        {"selfTime": 100, "attributableURLs": ["https://a.com/x.js"]},
    ])
    out = tmp_path / "out" / "result.json"

    main([
        "--network", network,
        "--tasks", tasks,
        "--final-url", "https://b.com/",
        "--cpu-slowdown", "4",
        "--out", str(out),
        "--text",
    ])

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["firstPartyEntity"] == "b.com"
    assert payload["cpuMultiplier"] == 4
    assert payload["score"] == 0
    assert payload["displayValueMs"] == 350
    assert [i["entity"]["text"] for i in payload["details"]["items"]] == ["a.com"]
    stdout = capsys.readouterr().out
    assert "Loaded 2 network records and 1 tasks." in stdout
    assert "FAIL: Third-party code blocked the main thread for 350 ms" in stdout


def test_cli_malformed_url_exits(tmp_path: Path, capsys):
    network = _write(tmp_path / "network.json", [{"url": "data:text/plain,hi", "transferSize": 1}])
    out = tmp_path / "result.json"

    with pytest.raises(SystemExit) as exc:
        main(["--network", network, "--final-url", "https://b.com/", "--out", str(out)])
    assert exc.value.code == 2
    assert "Attribution failed" in capsys.readouterr().err
    assert not out.exists()


def test_cli_skip_malformed(tmp_path: Path):
    network = _write(tmp_path / "network.json", [
        {"url": "data:text/plain,hi", "transferSize": 1},
        {"url": "https://a.com/x.js", "transferSize": 10},
    ])
    out = tmp_path / "result.json"

    main(["--network", network, "--final-url", "https://b.com/", "--skip-malformed", "--out", str(out)])
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["details"]["summary"]["wastedBytes"] == 10


def test_cli_group_by_etld1_with_tracker_radar(tmp_path: Path):
    network = _write(tmp_path / "network.json", [
        {"url": "https://www.b.com/", "transferSize": 1},
        {"url": "https://static.b.com/app.js", "transferSize": 500},
        {"url": "https://stats.g.doubleclick.net/r.js", "transferSize": 7000},
    ])
    index = _write(tmp_path / "radar.json", {"doubleclick.net": {"entity": "Google LLC", "categories": ["Ad Motivated Tracking"]}})
    out = tmp_path / "result.json"

    main([
        "--network", network,
        "--final-url", "https://www.b.com/",
        "--throttling-method", "devtools",
        "--group-by", "etld1",
        "--tracker-radar-index", index,
        "--out", str(out),
    ])
    payload = json.loads(out.read_text(encoding="utf-8"))
    items = payload["details"]["items"]
    assert [i["entity"]["text"] for i in items] == ["doubleclick.net"]
    assert items[0]["entityName"] == "Google LLC"
    assert payload["score"] == 1


def test_cli_missing_input_file(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--network", str(tmp_path / "nope.json"), "--final-url", "https://b.com/", "--out", str(tmp_path / "o.json")])
    assert exc.value.code == 2
