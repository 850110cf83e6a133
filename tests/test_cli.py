from vcdscan.cli import format_unchanging, main, report
from vcdscan.model import ValueChange, Var
from vcdscan.parser import parse_lines

SAMPLE = """$timescale 1ns $end
$scope module top $end
$var wire 1 ! clk $end
$var reg 1 # rst $end
$var parameter 4 $ WIDTH $end
$enddefinitions $end
$dumpvars
0!
1#
b0101 $
$end
#5
1!
"""


def test_format_unchanging_no_changes():
    var = Var("top", "module", "wire", 1, "!", "clk")
    assert format_unchanging(var) == (
        "Variable: clk Scope: module top Identifier: ! Change: []"
    )


def test_format_unchanging_with_change():
    var = Var("top", "module", "reg", 1, "#", "rst", [ValueChange(0, "1")])
    assert format_unchanging(var).endswith(
        'Change: [ValueChange { time: 0, value: "1" }]'
    )


def test_report_layout():
    dump = parse_lines(SAMPLE.splitlines(keepends=True), "w.vcd")
    text = report(dump)
    assert text.startswith("\nVariables that do not change:\n")
    assert "Variable: rst Scope: module top Identifier: #" in text
    assert "clk" not in text
    assert "WIDTH" not in text
    assert text.endswith(dump.info.describe() + "\n")


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert "Must provide target VCD file" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.vcd")]) == 1


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "w.vcd"
    path.write_text(SAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Timescale: $timescale" in out
    assert f"{path}\n\tDate: " in out


def test_main_reports_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.vcd"
    path.write_text("$dumpvars\n1?\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Index not found" in capsys.readouterr().err