"""
Generate a pipe simulation and dump it as JSON.

Usage:
    python -m pipeworks --pipes 4 --turns 32 --seed 7
    python -m pipeworks --output sim.json --plot trails.png
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pipeworks.common import ColorParams, GridBounds, SimulationParams
from pipeworks.logging_config import setup_logging
from pipeworks.simulation import PipeSimulation

logger = logging.getLogger("pipeworks.cli")


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.strip().split("\n")[0])
    parser.add_argument("--pipes", type=int, default=4, help="Number of pipes")
    parser.add_argument("--turns", type=int, default=32, help="Turns per pipe")
    parser.add_argument("--angle", type=float, default=90.0, help="Turn angle (deg)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--grid-min", type=int, default=-4, help="Lower grid bound")
    parser.add_argument("--grid-max", type=int, default=4, help="Upper grid bound")
    parser.add_argument("--saturation", type=float, default=100.0)
    parser.add_argument("--lightness", type=float, default=55.0)
    parser.add_argument(
        "--uniforms", action="store_true", help="Dump shader uniforms instead"
    )
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here")
    parser.add_argument("--plot", type=Path, default=None, help="Save trail preview")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def build_params(args: argparse.Namespace) -> SimulationParams:
    return SimulationParams(
        num_pipes=args.pipes,
        num_turns=args.turns,
        rotation_angle=args.angle,
        seed=args.seed,
        grid=GridBounds(grid_min=args.grid_min, grid_max=args.grid_max),
        color=ColorParams(saturation=args.saturation, lightness=args.lightness),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = get_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        params = build_params(args)
        simulation = PipeSimulation(params=params)
    except ValueError as e:
        logger.error(f"Could not generate simulation: {e}")
        return 1

    payload = simulation.uniforms() if args.uniforms else simulation.to_dict()
    text = json.dumps(payload, indent=2)

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(simulation)} pipes to {args.output}")
    else:
        print(text)

    if args.plot is not None:
        from pipeworks.viz import plot_trails

        plot_trails(simulation.pipes, output_path=args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
