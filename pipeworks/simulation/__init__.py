"""
Pipe simulation assembly and shader-uniform marshaling.
"""

from .simulation import PipeSimulation, RenderablePipe, RotationUniform
from .uniforms import (
    get_object_property_as_array,
    make_uniforms_for_array,
    make_uniforms_for_object_array,
)

__all__ = [
    "PipeSimulation",
    "RenderablePipe",
    "RotationUniform",
    "get_object_property_as_array",
    "make_uniforms_for_array",
    "make_uniforms_for_object_array",
]
