"""Command line report of the variables that never change in a VCD file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .model import ValueChange, Var
from .parser import VcdDump, VcdParseError, parse_file


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_change(change: ValueChange) -> str:
    return f"ValueChange {{ time: {change.time}, value: {_quote(change.value)} }}"


def format_unchanging(var: Var) -> str:
    """Format one line of the report for a variable."""
    changes = ", ".join(_format_change(change) for change in var.changes)
    return (
        f"Variable: {var.reference} Scope: {var.scope_type} {var.scope} "
        f"Identifier: {var.identifier} Change: [{changes}]"
    )


def report(dump: VcdDump) -> str:
    """Return the full text report for a parsed dump."""
    lines = ["", "Variables that do not change:"]
    lines.extend(format_unchanging(var) for var in dump.unchanging())
    lines.append(dump.info.describe())
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report for the single VCD file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Must provide target VCD file", file=sys.stderr)
        return 1
    try:
        dump = parse_file(args[0])
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    except (VcdParseError, UnicodeDecodeError) as error:
        print(f"ERROR: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(report(dump))
    return 0


if __name__ == "__main__":
    sys.exit(main())