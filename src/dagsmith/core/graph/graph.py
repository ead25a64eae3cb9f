"""Graph - shared node table for one logical dependency graph."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from dagsmith.core.config import GraphConfig
from dagsmith.core.errors import (
    CapacityExceededError,
    CrossGraphError,
    DanglingNodeError,
    InvalidTaskError,
)
from dagsmith.core.export.batch import Batch, ExportedTask
from dagsmith.core.graph.group import join
from dagsmith.core.graph.node import Node
from dagsmith.core.identity import IdentitySource, default_identity_source
from dagsmith.core.types import GraphId, GraphState, NodeId

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    """A task tagged with its own label and its predecessor labels."""

    label: NodeId
    task: Any
    after: set[NodeId] = field(default_factory=set)


class Graph:
    """Builder for a strictly ordered dependency graph of opaque tasks.

    The graph only records "runs after" edges. It never executes, inspects
    or orders tasks; ``export`` hands a flat, unordered batch to whatever
    scheduler runs them.

    Every node handle created from a graph refers back to it, so any number
    of handles share one table. Each mutation (allocating a node, adding an
    edge, draining) happens under the graph's lock, one at a time.

    Args:
        identity_source: Where the graph id comes from. Defaults to the
            process-wide source.
        config: Construction limits. Defaults to ``GraphConfig.from_env()``,
            so DAGSMITH_MAX_SEQUENCE applies to graphs built without one.

    Example:
        >>> graph = Graph()
        >>> graph.root("a").fork(("b", "c", "d")).join("e").then("f")
        >>> batch = graph.export()
        >>> len(batch)
        6
    """

    def __init__(
        self,
        identity_source: IdentitySource | None = None,
        *,
        config: GraphConfig | None = None,
    ) -> None:
        self._source = identity_source or default_identity_source()
        self._config = config or GraphConfig.from_env()
        self._id: GraphId = self._source.next_id()
        self._nodes: dict[NodeId, _Entry] = {}
        self._next_sequence = 0
        self._state = GraphState.OPEN
        self._warned_drained = False
        self._lock = threading.RLock()

    @property
    def id(self) -> GraphId:
        """Identity of this graph within its identity source."""
        return self._id

    @property
    def state(self) -> GraphState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_drained(self) -> bool:
        """True once ``export`` has been called."""
        return self._state is GraphState.DRAINED

    @property
    def max_sequence(self) -> int:
        """Largest sequence number this graph will hand out."""
        return self._config.max_sequence

    def root(self, task: Any) -> Node:
        """Create a node with no dependencies within the graph.

        A graph can have any number of roots.

        Args:
            task: Opaque task to schedule.

        Returns:
            Handle to the new node.
        """
        return self._link((), (task,))[0]

    def join(self, nodes: Iterable[Node], task: Any) -> Node:
        """Add a node that runs after every node in ``nodes``. See ``group.join``."""
        nodes = list(nodes)
        for node in nodes:
            if isinstance(node, Node) and not self.is_same_graph(node.graph):
                raise CrossGraphError(self._id, node.graph.id)
        return join(nodes, task)

    def is_same_graph(self, other: Graph) -> bool:
        """Check if two graph instances are the same logical graph."""
        return self._source is other._source and self._id == other._id

    def export(self) -> Batch:
        """Drain every node into an unordered batch.

        The table is empty afterwards, for this graph and for every handle
        pointing at it. Later calls return an empty batch.

        Returns:
            One ExportedTask per node created since construction.
        """
        with self._lock:
            entries = list(self._nodes.values())
            self._nodes.clear()
            first = self._state is GraphState.OPEN
            self._state = GraphState.DRAINED

        batch = Batch(
            ExportedTask(label=entry.label, after=frozenset(entry.after), task=entry.task)
            for entry in entries
        )
        if first:
            logger.info("graph %d exported: %d tasks", self._id, len(batch))
        else:
            logger.debug("graph %d already drained, exporting empty batch", self._id)
        return batch

    # ------------------------------------------------------------------
    # Internal mutation
    # ------------------------------------------------------------------

    def _link(self, origins: Sequence[NodeId], tasks: Sequence[Any]) -> list[Node]:
        """Create one node per task, each depending on every origin.

        This is the single entry point used by root, then, fork and join.
        Origins and tasks are validated before the first node is created,
        so a failed call leaves the table untouched.
        """
        with self._lock:
            for origin in origins:
                if origin.graph != self._id:
                    raise CrossGraphError(self._id, origin.graph)
            for task in tasks:
                self._check_task(task)
            self._check_capacity(len(tasks))

            created = []
            for task in tasks:
                node = self._create_node(task)
                for origin in origins:
                    self._add_dependency(origin, node.id)
                created.append(node)
            return created

    def _check_task(self, task: Any) -> None:
        if isinstance(task, Node):
            if not self.is_same_graph(task.graph):
                raise CrossGraphError(self._id, task.graph.id)
            raise InvalidTaskError(
                f"Expected a task, got existing node {task.id}; use join to depend on nodes"
            )

    def _check_capacity(self, count: int) -> None:
        if count and self._next_sequence + count - 1 > self._config.max_sequence:
            raise CapacityExceededError(self._id, self._config.max_sequence)

    def _create_node(self, task: Any) -> Node:
        with self._lock:
            self._check_capacity(1)
            node_id = NodeId(self._id, self._next_sequence)
            self._next_sequence += 1

            if self._state is GraphState.DRAINED:
                if not self._warned_drained:
                    logger.warning(
                        "graph %d is drained; new nodes such as %s will not be exported",
                        self._id,
                        node_id,
                    )
                    self._warned_drained = True
            else:
                self._nodes[node_id] = _Entry(label=node_id, task=task)
                logger.debug("node created: %s", node_id)

            return Node(id=node_id, graph=self)

    def _add_dependency(self, origin: NodeId, dependent: NodeId) -> None:
        with self._lock:
            if origin.graph != self._id:
                raise CrossGraphError(self._id, origin.graph)
            if dependent.graph != self._id:
                raise CrossGraphError(self._id, dependent.graph)
            if self._state is GraphState.DRAINED:
                return

            entry = self._nodes.get(dependent)
            if entry is None:
                raise DanglingNodeError(dependent)
            entry.after.add(origin)
            logger.debug("dependency added: %s after %s", dependent, origin)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        """Number of nodes waiting to be exported."""
        with self._lock:
            return len(self._nodes)

    def __contains__(self, item: object) -> bool:
        node_id = item.id if isinstance(item, Node) else item
        with self._lock:
            return node_id in self._nodes

    def __repr__(self) -> str:
        return f"Graph(id={self._id}, nodes={len(self)}, state={self._state.name})"
