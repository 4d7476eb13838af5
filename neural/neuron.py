"""
organism_sim module: neural/neuron.py

Node kinds of the fixed sensor -> hidden -> action controller.
"""

from __future__ import annotations
from enum import Enum


class NodeKind(Enum):
    SENSOR = 0
    HIDDEN = 1
    ACTION = 2


# kinds a gene may start from / end at
SOURCE_KINDS = (NodeKind.SENSOR, NodeKind.HIDDEN)
DEST_KINDS = (NodeKind.HIDDEN, NodeKind.ACTION)
