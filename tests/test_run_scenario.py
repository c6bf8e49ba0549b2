import json
from pathlib import Path

import pytest

import run_scenario

DEMO = Path(__file__).resolve().parent.parent / "scenarios" / "demo.json"


def test_demo_scenario():
    config = json.loads(DEMO.read_text())
    controller = run_scenario.build_controller(config)
    runs = run_scenario.run_steps(controller, config["steps"])
    assert [run["visited"] for run in runs] == [
        [3, 5, 6, 4, 2],
        [1, 4, 9, 12, 10, 5, 2],
        [13, 2, 15],
    ]
    assert runs[-1]["state"]["service"]["floor"] == 15


def test_emergency_step():
    controller = run_scenario.build_controller({})
    runs = run_scenario.run_steps(
        controller,
        [{"type": "service", "destination": 4}, {"type": "emergency"}, {"type": "run_service"}],
    )
    assert runs[0]["state"]["service"]["emergency_active"] is True
    assert runs[1]["visited"] == []


def test_unknown_step():
    controller = run_scenario.build_controller({})
    with pytest.raises(ValueError):
        run_scenario.run_steps(controller, [{"type": "teleport"}])


def test_save_results(tmp_path):
    target = tmp_path / "out" / "results.json"
    run_scenario.save_results(target, {"scenario": "x"})
    assert json.loads(target.read_text()) == {"scenario": "x"}


def test_bad_timings_raise_value_error():
    with pytest.raises(ValueError, match="travel_seconds"):
        run_scenario.build_controller({"timings": {"travel_seconds": "fast"}})
