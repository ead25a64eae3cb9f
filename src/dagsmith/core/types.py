"""Pure data types for dagsmith.core.

These are simple dataclasses with no behavior coupling. They carry the
identities the builder hands to an external scheduler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias

GraphId: TypeAlias = int
"""Identity of one Graph, unique within its IdentitySource."""

# Largest sequence number a graph may hand out (u32 range).
MAX_SEQUENCE = 2**32 - 1


class GraphState(Enum):
    """Graph lifecycle states."""

    OPEN = auto()  # Accepts root/then/fork/join
    DRAINED = auto()  # Exported, table permanently empty


@dataclass(frozen=True, order=True, slots=True)
class NodeId:
    """Identifies a single node and doubles as its scheduling label.

    Attributes:
        graph: Id of the graph that created the node.
        sequence: Creation index within that graph, starting at 0.
    """

    graph: GraphId
    sequence: int

    def __str__(self) -> str:
        return f"NodeId({self.graph}, {self.sequence})"
