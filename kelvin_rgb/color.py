"""Color value returned by the temperature converter."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Color:
    """An 8-bit per channel RGB color.

    Compares equal to another Color or to a plain (r, g, b) tuple or list
    holding the same values, and hashes like that tuple.
    """

    r: int
    g: int
    b: int

    @property
    def red(self) -> int:
        return self.r

    @property
    def green(self) -> int:
        return self.g

    @property
    def blue(self) -> int:
        return self.b

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the channels as an (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Color):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, (tuple, list)):
            return len(other) == 3 and self.as_tuple() == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())
