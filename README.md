# vcdscan

`vcdscan` reads a Value Change Dump (`.vcd`) file, the kind written by Verilog
and other HDL simulators. It lists the variables whose value changes at most
once during the simulation.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and call pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
vcdscan waveform.vcd
```

The command prints a blank line and then the heading
`Variables that do not change:`. Under it comes one line for each variable with
at most one recorded value change. Variables of type `parameter` are left out.
Each line has this form:

```
Variable: <reference> Scope: <scope type> <scope> Identifier: <id> Change: [ValueChange { time: 0, value: "1" }]
```

After the list comes a summary of the file. It shows the file name, then the
`Date`, `Timescale` and `Version` fields.

If no file is given, or more than one, the command prints
`Must provide target VCD file` to standard error and exits with status 1. The
same status is used when the file cannot be opened. It is also used when the
file cannot be decoded as UTF-8, or when its contents cannot be parsed. In
those cases the message goes to standard error.

## Library use

```python
from vcdscan.parser import parse_file
from vcdscan.cli import report

dump = parse_file("waveform.vcd")
for var in dump.unchanging():
    print(var.reference, var.scope, var.changes)

print(report(dump))
```

### `vcdscan.parser`

- `parse_file(path)` reads a UTF-8 file and returns a `VcdDump`.
- `parse_lines(lines, name)` does the same for lines already in memory. The
  lines must keep their line endings.
- `VcdDump` has `info` (a `VcdInfo`) and `variables` (a list of `Var` in
  declaration order). `VcdDump.unchanging()` returns the non-parameter
  variables that changed at most once.
- `split_words(line)` splits a line on spaces, tabs and newlines. A word counts
  only when a separator follows it. Text at the very end of a line with no
  newline after it is therefore dropped.
- `var_from_words(words, scope, scope_type)` builds a `Var` from the words of a
  one-line `$var` declaration. The size must be a whole number from 0 to 255.
- `VcdParseError` (a `ValueError`) is raised for malformed input, for example:
  - a value change refers to an identifier that was never declared;
  - a `$var` or `$scope` line is incomplete;
  - a size or a `#` time is not a valid unsigned number.

### `vcdscan.model`

- `VcdInfo` has the fields `file`, `date`, `timescale` and `version`.
  `VcdInfo.describe()` renders the summary.
- `Var` has the fields `scope`, `scope_type`, `var_type`, `size`, `identifier`,
  `reference` and `changes`. `Var.is_static()` is true when `changes` has at
  most one entry.
- `ValueChange` has the fields `time` and `value`.

### `vcdscan.cli`

- `format_unchanging(var)` formats one report line.
- `report(dump)` returns the whole report text.
- `main(argv=None)` runs the command and returns its exit status.

## Limits

- Each declaration must sit on a single line. A `$var` declaration needs at
  least six words: `$var`, the type, the size, the identifier, the reference
  and a sixth word. The sixth word is either `$end` or a bit range that gets
  appended to the reference.
- Value changes are recorded only after a `$dumpvars` line has been seen.
  Scalar changes start with `0`, `1`, `x`, `X`, `z` or `Z`. Vector and real
  changes start with `b`, `B`, `r` or `R`, followed by the identifier as a
  separate word.
- The `date`, `timescale` and `version` fields record only the keyword seen
  (`$date`, `$timescale`, `$version`). They do not record the text that
  follows it.
- `$upscope` is ignored. A variable takes the scope of the most recent
  `$scope` line, so no full hierarchical path is kept.
- `$comment` blocks are not skipped as a whole. Only a line whose first word is
  a keyword is ignored.
- There is no waveform viewing, filtering or export. The package only reports
  variables that do not change.