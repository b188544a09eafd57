"""Centralized configuration for skilltree."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PASSES: int = 4


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for the layout pipeline.

    passes: number of barycenter sweeps, alternating down and up.
    """

    passes: int = DEFAULT_PASSES

    def __post_init__(self) -> None:
        if self.passes < 0:
            raise ValueError(f"passes must be >= 0, got {self.passes}")
