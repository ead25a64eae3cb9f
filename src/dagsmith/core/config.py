"""Graph configuration.

Defaults can be overridden via environment variables:
    DAGSMITH_MAX_SEQUENCE: Largest sequence number a graph may allocate.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dagsmith.core.types import MAX_SEQUENCE

ENV_MAX_SEQUENCE = "DAGSMITH_MAX_SEQUENCE"


@dataclass(frozen=True)
class GraphConfig:
    """Per-graph construction limits.

    Attributes:
        max_sequence: Largest sequence number the graph hands out. The graph
            holds at most max_sequence + 1 nodes over its lifetime.
    """

    max_sequence: int = MAX_SEQUENCE

    def __post_init__(self) -> None:
        if not 0 <= self.max_sequence <= MAX_SEQUENCE:
            raise ValueError(
                f"max_sequence must be between 0 and {MAX_SEQUENCE}, got {self.max_sequence}"
            )

    @classmethod
    def from_env(cls) -> GraphConfig:
        """Build a config from DAGSMITH_* environment variables.

        Returns:
            GraphConfig with unset variables left at their defaults.

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        raw = os.environ.get(ENV_MAX_SEQUENCE)
        if raw is None or not raw.strip():
            return cls()
        try:
            max_sequence = int(raw)
        except ValueError:
            raise ValueError(f"{ENV_MAX_SEQUENCE} must be an integer, got {raw!r}") from None
        return cls(max_sequence=max_sequence)
