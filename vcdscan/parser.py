"""Line-oriented parser for Value Change Dump files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from .model import ValueChange, Var, VcdInfo

_SEPARATORS = re.compile(r"[ \t\n]")
_UNSIGNED = re.compile(r"\+?[0-9]+")

_SCALAR_VALUES = frozenset("01xXzZ")
_VECTOR_PREFIXES = frozenset("bBrR")

_MAX_SIZE = 0xFF
_MAX_TIME = 0xFFFF_FFFF_FFFF_FFFF


class VcdParseError(ValueError):
    """Raised when a VCD file cannot be understood."""


@dataclass
class VcdDump:
    """The header and the variables read from a VCD file."""

    info: VcdInfo
    variables: list[Var] = field(default_factory=list)

    def unchanging(self) -> list[Var]:
        """Variables, other than parameters, that change at most once."""
        return [
            var
            for var in self.variables
            if var.is_static() and var.var_type != "parameter"
        ]


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces, tabs or newlines.

    A word is only taken once a separator follows it, so trailing text
    with no separator after it is not returned.
    """
    *terminated, _unterminated = _SEPARATORS.split(line)
    return [word for word in terminated if word]


def _parse_unsigned(text: str, limit: int, what: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise VcdParseError(f"invalid {what}: {text!r}")
    number = int(text)
    if number > limit:
        raise VcdParseError(f"{what} out of range: {text!r}")
    return number


def var_from_words(words: list[str], scope: str, scope_type: str) -> Var:
    """Build a Var from the words of a ``$var`` declaration line."""
    if len(words) < 6:
        raise VcdParseError(f"incomplete $var declaration: {' '.join(words)!r}")
    reference = words[4]
    if "$end" not in words[5]:
        reference += words[5]
    return Var(
        scope=scope,
        scope_type=scope_type,
        var_type=words[1],
        size=_parse_unsigned(words[2], _MAX_SIZE, "variable size"),
        identifier=words[3],
        reference=reference,
    )


def parse_lines(lines: Iterable[str], name: str) -> VcdDump:
    """Parse VCD text given as lines that keep their line endings."""
    info = VcdInfo(file=name)
    variables: list[Var] = []
    by_identifier: dict[str, Var] = {}
    scope = ""
    scope_type = ""
    current_time = 0
    past_dumpvars = False

    def record(identifier: str, value: str) -> None:
        try:
            var = by_identifier[identifier]
        except KeyError:
            raise VcdParseError(f"Index not found for {identifier}.") from None
        var.changes.append(ValueChange(current_time, value))

    for line in lines:
        words = split_words(line)
        if not words:
            continue
        first = words[0]
        match first:
            case "$date":
                info.date = first
            case "$timescale":
                info.timescale = first
            case "$version":
                info.version = first
            case "$scope":
                if len(words) < 3:
                    raise VcdParseError(f"incomplete $scope declaration: {line!r}")
                scope_type, scope = words[1], words[2]
            case "$var":
                var = var_from_words(words, scope, scope_type)
                by_identifier[var.identifier] = var
                variables.append(var)
            case "$dumpvars":
                current_time = 0
                past_dumpvars = True
            case (
                "$comment" | "$enddefinitions" | "$upscope" | "$dumpall"
                | "$dumpoff" | "$dumpon" | "$end"
            ):
                pass
            case _ if past_dumpvars:
                lead, rest = first[0], first[1:]
                if lead == "#":
                    current_time = _parse_unsigned(rest, _MAX_TIME, "simulation time")
                elif lead in _SCALAR_VALUES:
                    record(rest, lead)
                elif lead in _VECTOR_PREFIXES:
                    if len(words) < 2:
                        raise VcdParseError(f"vector change without identifier: {line!r}")
                    record(words[1], rest)

    return VcdDump(info=info, variables=variables)


def parse_file(path: str | os.PathLike[str]) -> VcdDump:
    """Read and parse the VCD file at ``path``."""
    with open(path, encoding="utf-8", newline="\n") as handle:
        return parse_lines(handle, os.fspath(path))