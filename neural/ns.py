"""
organism_sim module: neural/ns.py

Neural controller decoded from a genome:
- sensors are set from the organism's neighbourhood each tick
- hidden nodes read sensors only
- action nodes read hidden nodes and, directly, sensors
- the strongest action above a threshold is taken, otherwise STAY

The topology is fixed by NsShape; genes only add weight to edges between
fixed node slots, so the network is feed-forward by construction.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

import config
from neural.action import Action
from neural.neuron import NodeKind
from neural.ns_shape import NsShape
from neural.synapse import Synapse
from organism.gene import Gene

EdgeKey = Tuple[NodeKind, int, NodeKind, int]


def _tanh(x: np.ndarray) -> np.ndarray:
    # stable tanh for typical magnitudes
    return np.tanh(np.clip(x, -20.0, 20.0))


def decode_edge(gene: Gene, shape: NsShape) -> EdgeKey | None:
    """
    Resolve a gene to a concrete (src_kind, src, dst_kind, dst) edge.

    Indices wrap modulo the node count of their kind. A hidden -> hidden
    gene is read as hidden -> action. Returns None when a kind has no nodes.
    """
    src_kind = gene.src_kind
    dst_kind = gene.dst_kind
    if src_kind == NodeKind.HIDDEN and dst_kind == NodeKind.HIDDEN:
        dst_kind = NodeKind.ACTION

    n_src = shape.count_for(src_kind)
    n_dst = shape.count_for(dst_kind)
    if n_src == 0 or n_dst == 0:
        return None
    return src_kind, gene.src_index % n_src, dst_kind, gene.dst_index % n_dst


@dataclass
class NS:
    shape: NsShape
    sensor_hidden: np.ndarray   # [hidden, sensor]
    hidden_action: np.ndarray   # [action, hidden]
    sensor_action: np.ndarray   # [action, sensor]

    @staticmethod
    def decode(genes: Iterable[Gene], shape: NsShape) -> "NS":
        edges: Dict[EdgeKey, float] = {}
        for gene in genes:
            key = decode_edge(gene, shape)
            if key is None:
                continue
            # duplicate edges accumulate
            edges[key] = edges.get(key, 0.0) + gene.weight

        sh = np.zeros((shape.hidden_count, shape.sensor_count))
        ha = np.zeros((shape.action_count, shape.hidden_count))
        sa = np.zeros((shape.action_count, shape.sensor_count))
        for (src_kind, src, dst_kind, dst), w in edges.items():
            if src_kind == NodeKind.SENSOR and dst_kind == NodeKind.HIDDEN:
                sh[dst, src] = w
            elif src_kind == NodeKind.HIDDEN:
                ha[dst, src] = w
            else:
                sa[dst, src] = w

        return NS(shape=shape, sensor_hidden=sh, hidden_action=ha, sensor_action=sa)

    def synapses(self) -> List[Synapse]:
        """Non-zero edges, for inspection and debugging."""
        out: List[Synapse] = []
        layers = (
            (NodeKind.SENSOR, NodeKind.HIDDEN, self.sensor_hidden),
            (NodeKind.HIDDEN, NodeKind.ACTION, self.hidden_action),
            (NodeKind.SENSOR, NodeKind.ACTION, self.sensor_action),
        )
        for src_kind, dst_kind, mat in layers:
            for dst, src in np.argwhere(mat != 0.0):
                out.append(Synapse(src_kind, int(src), dst_kind, int(dst), float(mat[dst, src])))
        return out

    def evaluate(self, sensors: Sequence[float]) -> np.ndarray:
        """
        Returns action activations in [-1, 1], indexed by action node.
        """
        s = np.asarray(sensors, dtype=float)
        if s.shape != (self.shape.sensor_count,):
            raise ValueError(
                f"expected {self.shape.sensor_count} sensor values, got {s.shape}"
            )
        hidden = _tanh(self.sensor_hidden @ s)
        return _tanh(self.hidden_action @ hidden + self.sensor_action @ s)

    def decide(self, sensors: Sequence[float], threshold: float = config.ACTION_THRESHOLD) -> Action:
        if self.shape.action_count == 0:
            return Action.STAY
        activations = self.evaluate(sensors)
        # argmax keeps the lowest index on ties
        best = int(np.argmax(activations))
        if activations[best] <= threshold or best >= len(Action):
            return Action.STAY
        return Action(best)
