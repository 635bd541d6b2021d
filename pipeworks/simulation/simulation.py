"""
Assemble a full set of renderable pipes.

Each pipe gets a starting position no other pipe uses, a color, a turn
sequence and the trail reconstructed from those turns. The result can be
flattened into shader uniforms or dumped as JSON.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from pipeworks.common import Rotation, SimulationParams, Vector3, flatten_matrix
from pipeworks.generators import PipeGenerator
from pipeworks.trails import PathReconstructor

from .uniforms import (
    get_object_property_as_array,
    make_uniforms_for_array,
    make_uniforms_for_object_array,
)

logger = logging.getLogger(__name__)


@dataclass
class RenderablePipe:
    """
    A single generated pipe.

    Attributes:
        starting_position: Grid cell the pipe starts from
        color: RGB color, channels in [0, 1]
        rotations: Turn sequence
        trail: Points visited, starting with starting_position
    """

    starting_position: Vector3
    color: Vector3
    rotations: List[Rotation]
    trail: List[Vector3]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "starting_position": list(self.starting_position.as_tuple()),
            "color": list(self.color.as_tuple()),
            "rotations": [
                {"axis": r.axis.name, "angle": r.angle} for r in self.rotations
            ],
            "trail": [p.serialize() for p in self.trail],
        }


@dataclass
class RotationUniform:
    """Per-turn shader data: flattened row-major matrix and axis value."""

    matrix: List[float]
    axis: int


class PipeSimulation:
    """
    A reproducible set of pipes.

    Pipes are generated once, at construction.
    """

    def __init__(
        self,
        pipe_generator: Optional[PipeGenerator] = None,
        params: Optional[SimulationParams] = None,
        reconstructor: Optional[PathReconstructor] = None,
    ):
        """
        Initialize PipeSimulation.

        Args:
            pipe_generator: Generator to draw pipes from. When omitted, one
                is built from params (grid, color and seed).
            params: Simulation parameters
            reconstructor: Trail reconstructor
        """
        self.params = params if params is not None else SimulationParams()
        if pipe_generator is None:
            pipe_generator = PipeGenerator(
                grid=self.params.grid,
                color=self.params.color,
                rng=np.random.default_rng(self.params.seed),
            )
        self.pipe_generator = pipe_generator
        self.reconstructor = (
            reconstructor if reconstructor is not None else PathReconstructor()
        )
        self.pipes = self.generate_pipes(self.params.num_pipes)

    def generate_pipes(self, num_pipes: int) -> List[RenderablePipe]:
        used_positions: List[Vector3] = []
        pipes = []

        for _ in range(num_pipes):
            position = self.pipe_generator.generate_position(used_positions)
            used_positions.append(position)

            rotations = self.pipe_generator.generate_pipe_directions(
                self.params.num_turns, self.params.rotation_angle
            )
            pipes.append(
                RenderablePipe(
                    starting_position=position,
                    color=self.pipe_generator.generate_color(),
                    rotations=rotations,
                    trail=self.reconstructor.build_trail(position, rotations),
                )
            )

        logger.info(
            f"Generated {num_pipes} pipes with {self.params.num_turns} turns each"
        )
        return pipes

    def rotation_uniforms(self) -> List[RotationUniform]:
        """Every pipe's turns, pipe after pipe."""
        return [
            RotationUniform(matrix=flatten_matrix(r.to_matrix()), axis=int(r.axis))
            for pipe in self.pipes
            for r in pipe.rotations
        ]

    def uniforms(self) -> Dict[str, Any]:
        colors = [
            list(c.as_tuple()) for c in get_object_property_as_array(self.pipes, "color")
        ]
        positions = [
            list(p.as_tuple())
            for p in get_object_property_as_array(self.pipes, "starting_position")
        ]
        return {
            "num_pipes": len(self.pipes),
            "num_turns": self.params.num_turns,
            **make_uniforms_for_array("colors", colors),
            **make_uniforms_for_object_array("rotations", self.rotation_uniforms()),
            **make_uniforms_for_array("starting_positions", positions),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "params": self.params.to_dict(),
            "params_id": self.params.get_id(),
            "pipes": [pipe.to_dict() for pipe in self.pipes],
        }

    def __len__(self) -> int:
        return len(self.pipes)

    def __repr__(self) -> str:
        return f"PipeSimulation({len(self.pipes)} pipes)"
