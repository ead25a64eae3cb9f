"""Graph construction error types.

Every error here is a caller defect in how a graph was assembled, never a
transient condition. They are raised immediately and are not retried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dagsmith.core.types import GraphId, NodeId


class GraphError(Exception):
    """Base error for graph construction misuse."""


class CapacityExceededError(GraphError):
    """Raised when a graph would hand out a sequence number past its limit.

    Attributes:
        graph_id: The graph that ran out of sequence numbers.
        max_sequence: The largest sequence number the graph accepts.
    """

    def __init__(self, graph_id: GraphId, max_sequence: int):
        self.graph_id = graph_id
        self.max_sequence = max_sequence
        super().__init__(
            f"Cannot add more than {max_sequence + 1} nodes to graph {graph_id}"
        )


class DanglingNodeError(GraphError, LookupError):
    """Raised when a dependency targets a node missing from the table.

    Attributes:
        node_id: The node that could not be found.
    """

    def __init__(self, node_id: NodeId):
        self.node_id = node_id
        super().__init__(f"Attempted to add dependency for {node_id}, which doesn't exist")


class EmptyJoinError(GraphError, ValueError):
    """Raised when joining a group that holds no nodes."""

    def __init__(self) -> None:
        super().__init__("Attempted to join a collection of zero nodes")


class CrossGraphError(GraphError, ValueError):
    """Raised when one operation spans nodes from more than one graph.

    Attributes:
        expected: Graph id the operation was anchored to.
        actual: Graph id of the offending node.
    """

    def __init__(self, expected: GraphId, actual: GraphId):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Graph nodes must be from the same graph (expected graph {expected}, got {actual})"
        )


class InvalidTaskError(GraphError, TypeError):
    """Raised when a node handle is passed where a task is expected."""


class LabelCollisionError(GraphError, ValueError):
    """Raised when two exported tasks in one batch share a label.

    Labels are only unique among graphs drawn from the same IdentitySource.
    Graphs whose batches feed one scheduler must share a source.

    Attributes:
        label: The label carried by more than one task.
    """

    def __init__(self, label: NodeId):
        self.label = label
        super().__init__(
            f"Duplicate label in batch: {label}; graphs feeding one batch "
            f"must share an IdentitySource"
        )
