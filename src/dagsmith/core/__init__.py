"""Core graph builder - no execution, no scheduling.

Just nodes, "runs after" edges, and a one-shot export.
"""

from dagsmith.core.config import GraphConfig
from dagsmith.core.errors import (
    CapacityExceededError,
    CrossGraphError,
    DanglingNodeError,
    EmptyJoinError,
    GraphError,
    InvalidTaskError,
    LabelCollisionError,
)
from dagsmith.core.export import Batch, ExportedTask, batch_table, print_batch
from dagsmith.core.graph import Graph, Node, NodeList, NodeTuple, fork_from, join, join_all
from dagsmith.core.identity import IdentitySource, default_identity_source
from dagsmith.core.types import MAX_SEQUENCE, GraphId, GraphState, NodeId

__all__ = [
    # Graph
    "Graph",
    "Node",
    "NodeList",
    "NodeTuple",
    "fork_from",
    "join",
    "join_all",
    # Export
    "Batch",
    "ExportedTask",
    "batch_table",
    "print_batch",
    # Identity
    "IdentitySource",
    "default_identity_source",
    # Types
    "GraphId",
    "GraphState",
    "NodeId",
    "MAX_SEQUENCE",
    # Config
    "GraphConfig",
    # Errors
    "GraphError",
    "CapacityExceededError",
    "CrossGraphError",
    "DanglingNodeError",
    "EmptyJoinError",
    "InvalidTaskError",
    "LabelCollisionError",
]
