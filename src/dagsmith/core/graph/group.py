"""Fan-out and fan-in over groups of nodes.

A group is any list or tuple of Node handles. Tuples keep their shape and
arity through ``fork`` and ``join_all``; everything else becomes a list.

    A = graph.root("a")
    B, C = A.fork(("b", "c"))   # Both B and C run after A
    D = join([B, C], "d")       # D runs after B and C
    E, F = join_all([B, C], ("e", "f"))

NodeList and NodeTuple, returned by ``fork``, also support the ``>>``
operator:

    A.fork(["b", "c"]) >> "d"           # join
    A.fork(["b", "c"]) >> ["e", "f"]    # join_all
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dagsmith.core.errors import CrossGraphError, EmptyJoinError
from dagsmith.core.graph.node import Node
from dagsmith.core.types import NodeId


class _NodeGroup:
    """Join operations shared by NodeList and NodeTuple."""

    def join(self, task: Any) -> Node:
        """Add one node for ``task`` that runs after every node in the group."""
        return join(self, task)  # type: ignore[arg-type]

    def join_all(self, tasks: Iterable[Any]) -> NodeList | NodeTuple:
        """Join every task in ``tasks`` against the whole group."""
        return join_all(self, tasks)  # type: ignore[arg-type]

    @property
    def labels(self) -> list[NodeId]:
        """Scheduling labels of the group's nodes, in group order."""
        return [node.id for node in self]  # type: ignore[attr-defined]

    def __rshift__(self, other: Any) -> Any:
        """``group >> task`` joins; ``group >> [t1, t2]`` joins each task."""
        if isinstance(other, (list, tuple)):
            return self.join_all(other)
        return self.join(other)


class NodeList(_NodeGroup, list[Node]):
    """Dynamically sized group of nodes."""

    def __repr__(self) -> str:
        return f"NodeList({list.__repr__(self)})"


class NodeTuple(_NodeGroup, tuple[Node, ...]):
    """Fixed-arity group of nodes; unpacks like the tuple it came from."""

    def __repr__(self) -> str:
        return f"NodeTuple({tuple.__repr__(self)})"


def _task_list(tasks: Iterable[Any]) -> list[Any]:
    if isinstance(tasks, (str, bytes)) or not isinstance(tasks, Iterable):
        raise TypeError(f"Expected a list or tuple of tasks, got {type(tasks).__name__}")
    return list(tasks)


def _reshape(tasks: Iterable[Any], nodes: list[Node]) -> NodeList | NodeTuple:
    if isinstance(tasks, tuple):
        return NodeTuple(nodes)
    return NodeList(nodes)


def _validate_group(nodes: Iterable[Node]) -> list[Node]:
    """Check a join group is non-empty and confined to one graph.

    Returns:
        The group's members as a list.

    Raises:
        EmptyJoinError: If the group holds no nodes.
        CrossGraphError: If members come from different graphs.
        TypeError: If a member is not a Node.
    """
    members = list(nodes)
    if not members:
        raise EmptyJoinError()

    for member in members:
        if not isinstance(member, Node):
            raise TypeError(f"Cannot join {type(member).__name__}; expected Node")

    graph = members[0].graph
    for member in members[1:]:
        if not graph.is_same_graph(member.graph):
            raise CrossGraphError(graph.id, member.graph.id)
    return members


def fork_from(tasks: Iterable[Any], source: Node) -> NodeList | NodeTuple:
    """Create one node per task, each depending solely on ``source``.

    Args:
        tasks: Tuple or other iterable of tasks.
        source: Node every new node runs after.

    Returns:
        Nodes in task order, as a NodeTuple for tuple input and a NodeList
        otherwise.
    """
    task_list = _task_list(tasks)
    nodes = source.graph._link((source.id,), task_list)
    return _reshape(tasks, nodes)


def join(nodes: Iterable[Node], task: Any) -> Node:
    """Create one node for ``task`` depending on every node in ``nodes``.

    Nothing is added to the graph when validation fails.

    Args:
        nodes: Non-empty group of nodes from a single graph.
        task: Opaque task to schedule.

    Returns:
        Handle to the new node.

    Raises:
        EmptyJoinError: If ``nodes`` is empty.
        CrossGraphError: If ``nodes`` span more than one graph.
    """
    members = _validate_group(nodes)
    origins = [member.id for member in members]
    return members[0].graph._link(origins, (task,))[0]


def join_all(nodes: Iterable[Node], tasks: Iterable[Any]) -> NodeList | NodeTuple:
    """Join each task in ``tasks`` against the same full group of nodes.

    Functionally equivalent to calling ``join`` once per task.

    Args:
        nodes: Non-empty group of nodes from a single graph.
        tasks: Tuple or other iterable of tasks.

    Returns:
        The joined nodes, shaped like ``tasks``.

    Raises:
        EmptyJoinError: If ``nodes`` is empty.
        CrossGraphError: If ``nodes`` span more than one graph.
    """
    members = _validate_group(nodes)
    task_list = _task_list(tasks)
    origins = [member.id for member in members]
    created = members[0].graph._link(origins, task_list)
    return _reshape(tasks, created)
