"""Tests for dagsmith.core.export.render module."""

import io

from rich.console import Console

from dagsmith import Batch, batch_table, print_batch


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestBatchTable:
    """Tests for batch_table."""

    def test_one_row_per_task(self, graph):
        """Test the table has a row for each exported task."""
        graph.root("a").fork(["b", "c"])

        table = batch_table(graph.export(), title="build")

        assert table.row_count == 3
        assert table.title == "build"
        assert [column.header for column in table.columns] == ["label", "after", "task"]

    def test_rows_sorted_by_label(self, graph):
        """Test rows come out in label order whatever the batch order."""
        graph.root("a").fork(["b", "c"])
        batch = graph.export()
        shuffled = Batch(reversed(list(batch)))

        table = batch_table(shuffled)

        assert list(table.columns[0].cells) == [str(label) for label in sorted(batch.labels)]


class TestPrintBatch:
    """Tests for print_batch."""

    def test_prints_labels_and_tasks(self, graph):
        """Test output shows labels, predecessors and task reprs."""
        graph.root("fetch").then("process")
        console = _console()

        print_batch(graph.export(), console=console)

        output = console.file.getvalue()
        assert "NodeId(0, 0)" in output
        assert "NodeId(0, 1)" in output
        assert "'fetch'" in output
        assert "'process'" in output

    def test_long_tasks_truncated(self, graph):
        """Test long task reprs are shortened."""
        graph.root("x" * 200)
        console = _console()

        print_batch(graph.export(), console=console)

        output = console.file.getvalue()
        assert "x" * 200 not in output
        assert "..." in output

    def test_empty_batch(self):
        """Test an empty batch prints a note."""
        console = _console()

        print_batch(Batch(), console=console)

        assert "No tasks." in console.file.getvalue()
