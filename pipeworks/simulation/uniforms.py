"""
Flatten generated data into shader uniform mappings.

Uniform names address GLSL arrays and arrays of structs, e.g.
``colors[0]`` or ``rotations[3].matrix``.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Dict, Iterable, List, Mapping


def _as_mapping(item: Any) -> Mapping[str, Any]:
    if isinstance(item, Mapping):
        return item
    if is_dataclass(item) and not isinstance(item, type):
        return {f.name: getattr(item, f.name) for f in fields(item)}
    raise TypeError(f"Cannot read properties of {type(item).__name__}")


def make_uniforms_for_array(name: str, items: Iterable[Any]) -> Dict[str, Any]:
    """{"name[0]": items[0], "name[1]": items[1], ...}"""
    return {f"{name}[{index}]": item for index, item in enumerate(items)}


def make_uniforms_for_object_array(name: str, objects: Iterable[Any]) -> Dict[str, Any]:
    """
    One entry per property of every object: {"name[i].prop": value}.

    Args:
        name: Uniform array name
        objects: Dicts or dataclass instances

    Returns:
        Flat mapping of uniform names to values
    """
    uniforms: Dict[str, Any] = {}
    for index, item in enumerate(objects):
        for prop, value in _as_mapping(item).items():
            uniforms[f"{name}[{index}].{prop}"] = value
    return uniforms


def get_object_property_as_array(objects: Iterable[Any], key: str) -> List[Any]:
    """Collect one property across objects, e.g. [{"a": 5}, {"a": 6}] -> [5, 6]."""
    return [
        item[key] if isinstance(item, Mapping) else getattr(item, key)
        for item in objects
    ]
