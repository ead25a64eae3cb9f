"""Node - lightweight handle to one entry in a Graph."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, overload

from dagsmith.core.types import NodeId

if TYPE_CHECKING:
    from dagsmith.core.export.batch import Batch
    from dagsmith.core.graph.graph import Graph
    from dagsmith.core.graph.group import NodeList, NodeTuple


@dataclass(frozen=True)
class Node:
    """Handle to a single node within a Graph.

    Handles are cheap to copy and many of them may alias the same logical
    node. Holding or dropping a handle never changes the graph; only
    ``then``, ``fork`` and joins add entries.

    Example:
        >>> graph = Graph()
        >>> a = graph.root("a")
        >>> b = a.then("b")            # b runs after a
        >>> c, d = b.fork(("c", "d"))  # c and d run after b
        >>> e = join((c, d), "e")      # e runs after c and d

    Attributes:
        id: Identity of the node, used verbatim as its scheduling label.
        graph: The graph that owns the node.
    """

    id: NodeId
    graph: Graph

    @property
    def label(self) -> NodeId:
        """Scheduling label of this node."""
        return self.id

    def then(self, task: Any) -> Node:
        """Create a new node for ``task`` that runs after this one.

        Can be called any number of times on the same node; every resulting
        node depends on this node only.

        Args:
            task: Opaque task to schedule.

        Returns:
            Handle to the new node.
        """
        return self.graph._link((self.id,), (task,))[0]

    @overload
    def fork(self, tasks: tuple[Any, Any]) -> tuple[Node, Node]: ...

    @overload
    def fork(self, tasks: tuple[Any, Any, Any]) -> tuple[Node, Node, Node]: ...

    @overload
    def fork(self, tasks: tuple[Any, Any, Any, Any]) -> tuple[Node, Node, Node, Node]: ...

    @overload
    def fork(self, tasks: tuple[Any, ...]) -> NodeTuple: ...

    @overload
    def fork(self, tasks: Iterable[Any]) -> NodeList: ...

    def fork(self, tasks: Iterable[Any]) -> NodeList | NodeTuple:
        """Fan out into one new node per task, all running after this one.

        Siblings carry no dependency on each other. Equivalent to calling
        ``then`` once per task, except that the whole group is validated
        before any node is added.

        Args:
            tasks: Tuple or other iterable of tasks.

        Returns:
            NodeTuple when given a tuple, NodeList otherwise; element i is the
            node created for task i.
        """
        from dagsmith.core.graph.group import fork_from

        return fork_from(tasks, self)

    def export(self) -> Batch:
        """Drain the owning graph. See ``Graph.export``."""
        return self.graph.export()

    def __rshift__(self, other: Any) -> Any:
        """``a >> task`` chains with ``then``; ``a >> [t1, t2]`` forks."""
        if isinstance(other, (list, tuple)):
            return self.fork(other)
        return self.then(other)

    def __repr__(self) -> str:
        return f"Node({self.id})"
