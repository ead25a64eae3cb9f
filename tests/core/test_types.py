"""Tests for dagsmith.core.types module."""

from dagsmith import NodeId


class TestNodeId:
    """Tests for NodeId."""

    def test_str(self):
        """Test the diagnostic rendering."""
        assert str(NodeId(2, 7)) == "NodeId(2, 7)"

    def test_value_semantics(self):
        """Test equal pairs are equal and hash alike."""
        assert NodeId(0, 1) == NodeId(0, 1)
        assert NodeId(0, 1) != NodeId(1, 1)
        assert len({NodeId(0, 1), NodeId(0, 1), NodeId(0, 2)}) == 2

    def test_ordering(self):
        """Test ids sort by graph, then sequence."""
        ids = [NodeId(1, 0), NodeId(0, 2), NodeId(0, 1)]

        assert sorted(ids) == [NodeId(0, 1), NodeId(0, 2), NodeId(1, 0)]
