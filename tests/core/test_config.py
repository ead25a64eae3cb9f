"""Tests for dagsmith.core.config module."""

import pytest

from dagsmith import MAX_SEQUENCE, GraphConfig


class TestGraphConfig:
    """Tests for GraphConfig."""

    def test_defaults(self):
        """Test the default limit is the u32 range."""
        assert GraphConfig().max_sequence == MAX_SEQUENCE == 2**32 - 1

    def test_custom_limit(self):
        """Test a smaller limit is accepted."""
        assert GraphConfig(max_sequence=10).max_sequence == 10

    @pytest.mark.parametrize("value", [-1, MAX_SEQUENCE + 1])
    def test_out_of_range(self, value):
        """Test limits outside the u32 range are rejected."""
        with pytest.raises(ValueError, match="max_sequence must be between"):
            GraphConfig(max_sequence=value)

    def test_from_env_unset(self, monkeypatch):
        """Test defaults apply without environment overrides."""
        monkeypatch.delenv("DAGSMITH_MAX_SEQUENCE", raising=False)

        assert GraphConfig.from_env() == GraphConfig()

    def test_from_env(self, monkeypatch):
        """Test DAGSMITH_MAX_SEQUENCE overrides the limit."""
        monkeypatch.setenv("DAGSMITH_MAX_SEQUENCE", "1000")

        assert GraphConfig.from_env().max_sequence == 1000

    def test_from_env_invalid(self, monkeypatch):
        """Test a non-integer value fails loudly."""
        monkeypatch.setenv("DAGSMITH_MAX_SEQUENCE", "lots")

        with pytest.raises(ValueError, match="must be an integer"):
            GraphConfig.from_env()
