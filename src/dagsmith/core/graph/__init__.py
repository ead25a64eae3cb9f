"""Graph construction.

Graph owns the node table; Node handles chain (then) and fan out (fork);
groups of nodes fan in (join, join_all).

Example:
    >>> from dagsmith.core.graph import Graph
    >>>
    >>> graph = Graph()
    >>> graph.root("a").fork(("b", "c", "d")).join("e").then("f")
    >>> batch = graph.export()
"""

from dagsmith.core.graph.graph import Graph
from dagsmith.core.graph.group import NodeList, NodeTuple, fork_from, join, join_all
from dagsmith.core.graph.node import Node

__all__ = [
    "Graph",
    "Node",
    "NodeList",
    "NodeTuple",
    "fork_from",
    "join",
    "join_all",
]
