"""
Base class for parameter schemas.

Schemas are plain dataclasses whose fields are deep-copied on assignment, so
a parameter set handed to a generator cannot be mutated behind its back, and
whose content hashes to a stable id (handy for naming output files).
"""

from __future__ import annotations

import copy
import hashlib
import json
import math
from dataclasses import asdict, dataclass, fields, is_dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Any


def _quantize(x: float, places: int = 8) -> float:
    # str -> Decimal keeps the shortest repr, so ids don't drift with noise
    step = Decimal(1) / (Decimal(10) ** places)
    value = float(Decimal(str(x)).quantize(step, rounding=ROUND_HALF_EVEN))
    return 0.0 if value == 0.0 else value


def canonicalize(obj: Any, places: int = 8) -> Any:
    """Reduce obj to JSON-friendly builtins with floats quantized."""
    if isinstance(obj, float):
        if math.isnan(obj):
            return "NaN"
        return _quantize(obj, places)
    if is_dataclass(obj):
        return canonicalize(asdict(obj), places)
    if isinstance(obj, dict):
        return {str(k): canonicalize(v, places) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(v, places) for v in obj]
    return obj


def content_id(obj: Any, places: int = 8, digest_bytes: int = 8) -> str:
    """Deterministic hex digest of a dataclass (or builtin) value."""
    payload = json.dumps(
        canonicalize(obj, places),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
    return hashlib.blake2b(payload.encode("utf-8"), digest_size=digest_bytes).hexdigest()


@dataclass
class SchemaClass:
    def get_id(self) -> str:
        return content_id(self)

    def to_dict(self) -> dict:
        return asdict(self)

    # For logging ease
    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=4)

    def __post_init__(self):
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name))

    def __copy__(self):
        return self.__deepcopy__({})

    def __deepcopy__(self, memo):
        kwargs = {
            f.name: copy.deepcopy(getattr(self, f.name), memo) for f in fields(self)
        }
        return self.__class__(**kwargs)

    def __setattr__(self, name, value):
        super().__setattr__(name, copy.deepcopy(value))
