"""
organism_sim module: neural/synapse.py

Weighted directed connection between two decoded node slots.
"""

from __future__ import annotations
from dataclasses import dataclass

from neural.neuron import NodeKind


@dataclass
class Synapse:
    src_kind: NodeKind
    src: int
    dst_kind: NodeKind
    dst: int
    weight: float
