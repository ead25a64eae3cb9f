"""dagsmith - declarative builder for strictly ordered task graphs.

Callers assemble a DAG of opaque tasks with then (sequencing), fork
(fan-out) and join (fan-in). Exporting the graph yields a flat, unordered
batch where every task carries a unique label and the labels it must run
after. Running the tasks is left to an external scheduler.

Quick Start:
    >>> from dagsmith import Graph, join
    >>>
    >>> graph = Graph()
    >>> a = graph.root("load")
    >>> b, c = a.fork(("clean", "index"))
    >>> join([b, c], "publish")
    >>> for exported in graph.export():
    ...     print(exported.label, sorted(exported.after), exported.task)

Fan out into fan in:
    >>> graph.root("a").fork(("b", "c", "d")).join("e").then("f")

Handing the batch to graphlib:
    >>> batch = graph.export()
    >>> sorter = batch.to_sorter()
    >>> sorter.prepare()
"""

from dagsmith.__version__ import __version__
from dagsmith.core import (
    MAX_SEQUENCE,
    Batch,
    CapacityExceededError,
    CrossGraphError,
    DanglingNodeError,
    EmptyJoinError,
    ExportedTask,
    Graph,
    GraphConfig,
    GraphError,
    GraphId,
    GraphState,
    IdentitySource,
    InvalidTaskError,
    LabelCollisionError,
    Node,
    NodeId,
    NodeList,
    NodeTuple,
    batch_table,
    default_identity_source,
    fork_from,
    join,
    join_all,
    print_batch,
)

__all__ = [
    "__version__",
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
