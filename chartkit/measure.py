"""Text measurement hooks used to size guides before marks are generated."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

_GLYPH_WIDTH_EM = 0.6


@runtime_checkable
class TextMeasurer(Protocol):
    """Anything that can estimate the extent of a run of text."""

    def measure(self, text: str, font_size: float) -> tuple[float, float]:
        """Return ``(width, height)`` in the coordinate system of the marks."""


@dataclass(frozen=True)
class HeuristicTextMeasurer:
    """Rough measurer: each glyph is about 0.6em wide and text is 1em tall."""

    def measure(self, text: str, font_size: float) -> tuple[float, float]:
        width = _GLYPH_WIDTH_EM * font_size * len(text)
        return (width, font_size)