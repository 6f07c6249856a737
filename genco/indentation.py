"""Indentation state used when rendering Java source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Indentation:
    """A base indentation unit repeated once per nesting level."""

    base: str = "    "
    level: int = 0

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError("Indentation level cannot be negative")

    def current(self) -> str:
        """Return the indentation text for the current level."""
        return self.base * self.level

    def increase(self) -> None:
        """Nest one level deeper."""
        self.level += 1

    def decrease(self) -> None:
        """Go back one level; raises ValueError at level zero."""
        if self.level == 0:
            raise ValueError("Indentation level cannot go below zero")
        self.level -= 1