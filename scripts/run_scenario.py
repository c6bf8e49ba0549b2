"""CLI for replaying LiftDispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from dispatch import CarFactory, CarTimings, make_external_request, make_internal_request
from dispatch.controller import DispatchController

ROUTES = {
    "passenger_up": "route_up",
    "passenger_down": "route_down",
    "service": "route_service",
}

RUNS = {
    "run_passenger": "run_passenger_batch",
    "run_service": "run_service_batch",
}


def build_controller(config: Dict, realtime: bool = False) -> DispatchController:
    timings = CarTimings.from_dict(config.get("timings", {}))
    factory = CarFactory(timings=timings, delay=time.sleep if realtime else None)
    return DispatchController(factory)


def run_steps(controller: DispatchController, steps: List[Dict]) -> List[Dict]:
    results: List[Dict] = []
    for step in steps:
        kind = step.get("type")
        if kind in ROUTES:
            origin = step.get("origin")
            destination = step["destination"]
            if origin is None:
                request = make_internal_request(destination)
            else:
                request = make_external_request(origin, destination)
            getattr(controller, ROUTES[kind])(request)
        elif kind in RUNS:
            visited = getattr(controller, RUNS[kind])()
            results.append({"run": kind, "visited": visited, "state": controller.snapshot()})
        elif kind == "emergency":
            controller.trigger_emergency()
            results.append({"run": kind, "visited": [], "state": controller.snapshot()})
        else:
            raise ValueError(f"Unknown step type '{kind}'")
    return results


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write batch results as JSON",
    )
    parser.add_argument("--realtime", action="store_true", help="Sleep through each phase")
    parser.add_argument("--verbose", action="store_true", help="Narrate every phase")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = json.loads(args.config.read_text())
    controller = build_controller(config, realtime=args.realtime)
    runs = run_steps(controller, config.get("steps", []))

    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "runs": runs,
        "final_state": controller.snapshot(),
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    for run in runs:
        print(f"{run['run']}: visited {run['visited']}")
    print("Final state:")
    for car, state in results["final_state"].items():
        print(f"  {car}: {state}")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
