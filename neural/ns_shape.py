"""
organism_sim module: neural/ns_shape.py

Static architecture descriptor shared by every controller in a run.
"""

from __future__ import annotations
from dataclasses import dataclass

from neural.neuron import NodeKind


@dataclass(frozen=True)
class NsShape:
    sensor_count: int
    hidden_count: int
    action_count: int

    def __post_init__(self) -> None:
        for name in ("sensor_count", "hidden_count", "action_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def count_for(self, kind: NodeKind) -> int:
        if kind == NodeKind.SENSOR:
            return self.sensor_count
        if kind == NodeKind.HIDDEN:
            return self.hidden_count
        return self.action_count
