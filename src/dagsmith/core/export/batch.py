"""Exported batches - what a drained graph hands to a scheduler."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from graphlib import TopologicalSorter
from typing import Any

from dagsmith.core.errors import LabelCollisionError
from dagsmith.core.types import NodeId


@dataclass(frozen=True)
class ExportedTask:
    """A task annotated for the external scheduler.

    The scheduler must not start ``task`` until every task labelled in
    ``after`` has finished. No other ordering is implied.

    Attributes:
        label: Unique label of this task.
        after: Labels of the tasks that must finish first.
        task: The opaque task supplied when the node was created.
    """

    label: NodeId
    after: frozenset[NodeId]
    task: Any

    @property
    def is_root(self) -> bool:
        """True if the task has no predecessors."""
        return not self.after

    def to_dict(self, label_format: Callable[[NodeId], Any] = str) -> dict[str, Any]:
        """Convert to a plain dict, rendering labels with ``label_format``.

        Predecessor labels are sorted so the output is deterministic.
        """
        return {
            "label": label_format(self.label),
            "after": [label_format(label) for label in sorted(self.after)],
            "task": self.task,
        }


class Batch:
    """Flat, unordered collection of exported tasks keyed by label.

    Example:
        >>> batch = graph.export()
        >>> for exported in batch:
        ...     scheduler.add(exported.task, label=exported.label, after=exported.after)
    """

    __slots__ = ("_tasks",)

    def __init__(self, tasks: Iterable[ExportedTask] = ()) -> None:
        self._tasks: dict[NodeId, ExportedTask] = {}
        for exported in tasks:
            if exported.label in self._tasks:
                raise LabelCollisionError(exported.label)
            self._tasks[exported.label] = exported

    @classmethod
    def merge(cls, *batches: Batch) -> Batch:
        """Combine batches drained from several graphs into one."""
        return cls(exported for batch in batches for exported in batch)

    @property
    def labels(self) -> frozenset[NodeId]:
        """All labels in the batch."""
        return frozenset(self._tasks)

    @property
    def is_empty(self) -> bool:
        return not self._tasks

    def get(self, label: NodeId) -> ExportedTask | None:
        """Get the exported task for a label, or None if absent."""
        return self._tasks.get(label)

    def roots(self) -> list[ExportedTask]:
        """Tasks with no predecessors."""
        return [exported for exported in self._tasks.values() if exported.is_root]

    def dangling_references(self) -> list[str]:
        """Find predecessor labels that no task in the batch carries.

        A batch from a single full drain never has any. Merged or hand-built
        batches might.

        Returns:
            List of error messages (empty if every reference resolves).
        """
        errors: list[str] = []
        for exported in self._tasks.values():
            for label in sorted(exported.after):
                if label not in self._tasks:
                    errors.append(f"Task {exported.label} runs after unknown task {label}")
        return errors

    def to_dependency_map(self) -> dict[NodeId, set[NodeId]]:
        """Map each label to the labels it runs after (graphlib's input format)."""
        return {label: set(exported.after) for label, exported in self._tasks.items()}

    def to_sorter(self) -> TopologicalSorter[NodeId]:
        """Wrap the batch in a ``graphlib.TopologicalSorter`` for dispatch."""
        return TopologicalSorter(self.to_dependency_map())

    def to_records(self, label_format: Callable[[NodeId], Any] = str) -> list[dict[str, Any]]:
        """Convert to plain dicts, sorted by label.

        Args:
            label_format: Renders each label, for schedulers that match on
                strings rather than NodeId values.
        """
        return [self._tasks[label].to_dict(label_format) for label in sorted(self._tasks)]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[ExportedTask]:
        return iter(self._tasks.values())

    def __contains__(self, label: object) -> bool:
        return label in self._tasks

    def __repr__(self) -> str:
        return f"Batch({len(self._tasks)} tasks)"
