"""Tests for dagsmith.core.identity module."""

import threading

import pytest

from dagsmith import IdentitySource, default_identity_source


class TestIdentitySource:
    """Tests for IdentitySource."""

    def test_counts_from_zero(self):
        """Test ids start at 0 and increase by one."""
        source = IdentitySource()

        assert [source.next_id() for _ in range(3)] == [0, 1, 2]

    def test_start(self):
        """Test a custom starting id."""
        source = IdentitySource(start=10)

        assert source.next_id() == 10
        assert source.next_id() == 11

    def test_negative_start_rejected(self):
        """Test a negative start is invalid."""
        with pytest.raises(ValueError, match="non-negative"):
            IdentitySource(start=-1)

    def test_concurrent_allocation_is_unique(self):
        """Test ids allocated from many threads never collide."""
        source = IdentitySource()
        ids = []

        def worker():
            for _ in range(500):
                ids.append(source.next_id())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(ids) == list(range(4000))

    def test_default_source_is_shared(self):
        """Test the process-wide source is a single instance."""
        assert default_identity_source() is default_identity_source()
