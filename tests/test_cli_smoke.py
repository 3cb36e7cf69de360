import json
import logging
import os
import subprocess
import sys
from pathlib import Path

from typer.testing import CliRunner

from wgraph.cli import app

ROOT = Path(__file__).resolve().parent.parent
SAMPLE = ROOT / "sample_edges.csv"

runner = CliRunner()


def test_cli_smoke(tmp_path: Path):
    # Use the sample_edges.csv in repo root
    assert SAMPLE.exists(), "sample_edges.csv must exist at repo root for this smoke test"

    out_json = tmp_path / "report.json"

    env = dict(os.environ)
    env["PYTHONPATH"] = str(ROOT / "src")
    env["PYTHONIOENCODING"] = "utf-8"
    env["RICH_FORCE_TERMINAL"] = "0"

    cmd = [
        sys.executable,
        "-m",
        "wgraph.cli",
        "analyze",
        str(SAMPLE),
        "--source",
        "A",
        "--out-json",
        str(out_json),
    ]

    r = subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )

    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    assert out_json.exists()

    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["articulation_points"] == ["D"]
    assert data["distances"]["E"] == 7


def test_analyze_command(tmp_path: Path):
    out_json = tmp_path / "report.json"
    r = runner.invoke(app, ["analyze", str(SAMPLE), "--method", "tarjan", "--out-json", str(out_json)])
    assert r.exit_code == 0, r.output
    assert "Graph Summary" in r.output
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["num_components"] == 3
    assert data["distances"] is None


def test_analyze_unknown_source_fails():
    r = runner.invoke(app, ["analyze", str(SAMPLE), "--source", "Z"])
    assert r.exit_code == 1
    assert "not in the graph" in r.output


def test_missing_csv_is_bad_parameter(tmp_path: Path):
    r = runner.invoke(app, ["components", str(tmp_path / "missing.csv")])
    assert r.exit_code == 2


def test_shortest_paths_command():
    r = runner.invoke(app, ["shortest-paths", str(SAMPLE), "A"])
    assert r.exit_code == 0, r.output
    assert "unreached" in r.output

    r = runner.invoke(app, ["shortest-paths", str(SAMPLE), "A", "--target", "E"])
    assert r.exit_code == 0, r.output
    assert "7 via" in r.output

    r = runner.invoke(app, ["shortest-paths", str(SAMPLE), "A", "--target", "H"])
    assert r.exit_code == 1
    assert "No path" in r.output


def test_components_command():
    r = runner.invoke(app, ["components", str(SAMPLE)])
    assert r.exit_code == 0, r.output
    assert "3 component(s)" in r.output


def test_articulation_points_command():
    r = runner.invoke(app, ["articulation-points", str(SAMPLE)])
    assert r.exit_code == 0, r.output
    assert "ARTICULATION D" in r.output

    r = runner.invoke(app, ["articulation-points", str(SAMPLE), "--method", "bogus"])
    assert r.exit_code == 2


def test_analyze_verbose_enables_debug_logging():
    r = runner.invoke(app, ["analyze", str(SAMPLE), "--source", "A", "--verbose"])
    assert r.exit_code == 0, r.output
    assert logging.getLogger().level == logging.DEBUG

    r = runner.invoke(app, ["analyze", str(SAMPLE)])
    assert r.exit_code == 0, r.output
    assert logging.getLogger().level == logging.INFO

    r = runner.invoke(app, ["-v", "components", str(SAMPLE)])
    assert r.exit_code == 0, r.output
    assert logging.getLogger().level == logging.DEBUG


def test_analyze_writes_png(tmp_path: Path):
    out_png = tmp_path / "graph.png"
    r = runner.invoke(app, ["analyze", str(SAMPLE), "--out-png", str(out_png)])
    assert r.exit_code == 0, r.output
    assert out_png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
