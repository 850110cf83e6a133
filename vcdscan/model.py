"""Data types describing a parsed VCD dump."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class VcdInfo:
    """Header information of a VCD file."""

    file: str
    date: str = ""
    timescale: str = ""
    version: str = ""

    def describe(self) -> str:
        """Return a multi-line summary of the header fields."""
        return (
            f"{self.file}\n"
            f"\tDate: {self.date}\n"
            f"\tTimescale: {self.timescale}\n"
            f"\tVersion: {self.version}\n"
        )


@dataclass(frozen=True)
class ValueChange:
    """A value a variable takes on at a given simulation time."""

    time: int
    value: str


@dataclass
class Var:
    """A declared variable together with every recorded change of its value."""

    scope: str
    scope_type: str
    var_type: str
    size: int
    identifier: str
    reference: str
    changes: list[ValueChange] = field(default_factory=list)

    def is_static(self) -> bool:
        """True when the variable never changes after its first value."""
        return len(self.changes) <= 1