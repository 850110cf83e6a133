from vcdscan.model import ValueChange, Var, VcdInfo


def _var(changes=None):
    var = Var("top", "module", "wire", 1, "!", "clk")
    if changes:
        var.changes.extend(changes)
    return var


def test_describe_empty_header():
    info = VcdInfo("dump.vcd")
    assert info.describe() == "dump.vcd\n\tDate: \n\tTimescale: \n\tVersion: \n"


def test_describe_filled_header():
    info = VcdInfo("a.vcd", date="d", timescale="1ns", version="v")
    assert info.describe() == "a.vcd\n\tDate: d\n\tTimescale: 1ns\n\tVersion: v\n"


def test_var_starts_without_changes():
    assert _var().changes == []


def test_var_change_lists_are_independent():
    first = _var()
    second = _var()
    first.changes.append(ValueChange(0, "1"))
    assert second.changes == []


def test_is_static_with_no_or_one_change():
    assert _var().is_static() is True
    assert _var([ValueChange(0, "1")]).is_static() is True


def test_is_static_false_with_two_changes():
    assert _var([ValueChange(0, "0"), ValueChange(5, "1")]).is_static() is False


def test_value_change_equality():
    assert ValueChange(3, "x") == ValueChange(3, "x")
    assert ValueChange(3, "x") != ValueChange(4, "x")