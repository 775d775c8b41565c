from __future__ import annotations

import json
import logging

import pytest

from pathfinder import cli
from pathfinder.algorithms.base import FrontierSelect
from pathfinder.config import SOLVER_CONFIG
from pathfinder.graph import PathGraph


def test_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: pathfinder" in capsys.readouterr().out


@pytest.mark.parametrize("frontier", ["scan", "heap"])
def test_demo_all_scenarios_pass(capsys, frontier) -> None:
    cli.main(["demo", "--frontier", frontier])
    out = capsys.readouterr().out
    for name in cli.DEMO_SCENARIOS:
        assert name in out
    assert "FAIL" not in out
    assert out.count(" ok") == len(cli.DEMO_SCENARIOS)


def test_demo_reports_failure(capsys, monkeypatch) -> None:
    def _wrong(g: PathGraph):
        a, b = g.create_node(), g.create_node()
        return a, b, [a, b]

    monkeypatch.setitem(cli.DEMO_SCENARIOS, "broken", _wrong)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["demo"])
    assert exc_info.value.code == 1
    assert "FAIL" in capsys.readouterr().out


def test_path_found(capsys) -> None:
    cli.main(
        ["path", "A", "C", "-e", "A", "B", "1", "-e", "B", "C", "1", "-e", "A", "C", "8"]
    )
    out = capsys.readouterr().out
    assert "A -> B -> C" in out
    assert "cost: 2" in out


def test_path_json(capsys) -> None:
    cli.main(
        ["path", "A", "C", "--json", "--frontier", "heap",
         "-e", "A", "B", "5", "-e", "B", "C", "5", "-e", "A", "C", "2"]
    )
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"start": "A", "end": "C", "path": ["A", "C"], "cost": 2.0}


def test_path_not_found_exits_one(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["path", "A", "B", "-e", "B", "A", "1"])
    assert exc_info.value.code == 1
    assert "no path from A to B" in capsys.readouterr().out


def test_path_not_found_json(capsys) -> None:
    with pytest.raises(SystemExit):
        cli.main(["path", "A", "Z", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["path"] == []
    assert payload["cost"] is None


@pytest.mark.parametrize("cost", ["abc", "-1"])
def test_path_bad_cost_exits_two(cost, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="pathfinder"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["path", "A", "B", "-e", "A", "B", cost])
    assert exc_info.value.code == 2
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_cli_verbose_and_quiet_switch_levels(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="pathfinder"):
        cli.main(["--verbose", "demo"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="pathfinder"):
        cli.main(["--quiet", "demo"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_frontier_defaults_to_solver_config(monkeypatch) -> None:
    seen = []
    real_solve = cli.solve

    def _recording_solve(graph, start, end, frontier=None):
        seen.append(frontier)
        return real_solve(graph, start, end, frontier)

    monkeypatch.setattr(cli, "solve", _recording_solve)
    monkeypatch.setattr(SOLVER_CONFIG, "frontier", FrontierSelect.HEAP)

    cli.main(["path", "A", "B", "-e", "A", "B", "1"])
    assert seen == [FrontierSelect.HEAP]

    seen.clear()
    cli.main(["path", "A", "B", "-e", "A", "B", "1", "--frontier", "scan"])
    assert seen == [FrontierSelect.SCAN]


def test_verbose_then_default_restores_info_level() -> None:
    cli.main(["--verbose", "demo"])
    assert logging.getLogger("pathfinder").level == logging.DEBUG

    cli.main(["demo"])
    assert logging.getLogger("pathfinder").level == logging.INFO
