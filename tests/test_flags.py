import pytest

from decimal import Decimal

from yaap import flags
from yaap.convert import Unsigned
from yaap.flags import ErrorKind, Flag, ValueFlag


def matched(flag: Flag, args: list[str]) -> Flag:
    flag.match(["prog"] + args)
    return flag


# --- Flag ------------------------------------------------------------------- #


def test_option_statement():
    assert flags.isOptionStatement("-v")
    assert flags.isOptionStatement("-")
    assert not flags.isOptionStatement("v")
    assert not flags.isOptionStatement("")


def test_flag_initial_state():
    flag = Flag("v", "Verbose output")
    assert flag.identifier() == "v"
    assert flag.description() == "Verbose output"
    assert flag.exists() is False
    assert flag.isRequired() is False
    assert flag.hasError() is False
    assert flag.errors() == []


def test_flag_bad_identifier():
    with pytest.raises(ValueError):
        Flag("", "empty")
    with pytest.raises(ValueError):
        Flag("vv", "too long")


def test_flag_single():
    assert matched(Flag("v", ""), ["-v"]).exists()
    assert not matched(Flag("v", ""), ["-x"]).exists()
    assert not matched(Flag("v", ""), []).exists()


def test_flag_concatenated():
    assert matched(Flag("v", ""), ["-vV"]).exists()
    assert matched(Flag("V", ""), ["-vV"]).exists()
    assert matched(Flag("c", ""), ["-abc"]).exists()


def test_flag_needs_dash():
    assert not matched(Flag("v", ""), ["v"]).exists()
    assert not matched(Flag("v", ""), ["verbose"]).exists()


def test_flag_skips_program_name():
    flag = Flag("v", "")
    flag.match(["-v"])
    assert not flag.exists()


def test_flag_required_missing():
    flag = matched(Flag("h", "", required=True), ["-x"])
    assert flag.hasError()
    assert flag.errors() == [ErrorKind.MISSING_REQUIRED]


def test_flag_required_present():
    flag = matched(Flag("h", "", required=True), ["-h"])
    assert flag.exists()
    assert not flag.hasError()


def test_flag_usage_fragment():
    assert Flag("v", "").usageFragment() == " [-v]"


# --- ValueFlag -------------------------------------------------------------- #


def test_value_flag_initial_state():
    flag = ValueFlag("s", "Spacing", kind=float, arity=3)
    assert flag.arity() == 3
    assert flag.kind() is float
    assert flag.values() == (0.0, 0.0, 0.0)
    assert not flag.exists()
    assert not flag.hasError()


def test_value_flag_bad_arity():
    with pytest.raises(ValueError):
        ValueFlag("s", "", arity=0)


def test_value_flag_text():
    flag = matched(ValueFlag("i", "Input"), ["-i", "in.txt"])
    assert flag.exists()
    assert not flag.hasError()
    assert flag.value() == "in.txt"
    assert flag.value(0) == "in.txt"


def test_value_flag_slot_out_of_range():
    flag = matched(ValueFlag("i", "Input"), ["-i", "in.txt"])
    with pytest.raises(IndexError):
        flag.value(1)
    with pytest.raises(IndexError):
        flag.value(-1)


def test_value_flag_isolated():
    assert not matched(ValueFlag("V", ""), ["-vV", "x"]).exists()
    assert not matched(ValueFlag("i", ""), ["-xi", "in.txt"]).exists()


def test_value_flag_second_character():
    assert matched(ValueFlag("v", ""), ["-vV", "x"]).value() == "x"
    assert matched(ValueFlag("i", ""), ["-ifoo", "in.txt"]).value() == "in.txt"


def test_value_flag_insufficient_arguments():
    flag = matched(ValueFlag("s", "", kind=float, arity=3), ["-s", "1.0", "2.0"])
    assert flag.exists()
    assert flag.hasError()
    assert flag.errors() == [ErrorKind.INSUFFICIENT_ARGUMENTS]
    assert flag.values() == (0.0, 0.0, 0.0)


def test_value_flag_last_token():
    flag = matched(ValueFlag("o", ""), ["-o"])
    assert flag.exists()
    assert flag.errors() == [ErrorKind.INSUFFICIENT_ARGUMENTS]


def test_value_flag_conversion_failure():
    flag = matched(ValueFlag("t", "", kind=Unsigned), ["-t", "notanumber"])
    assert flag.exists()
    assert flag.hasError()
    assert flag.errors() == [ErrorKind.CONVERSION_FAILURE]


def test_value_flag_conversion_continues():
    flag = matched(ValueFlag("e", "", kind=int, arity=3), ["-e", "1", "x", "y"])
    assert flag.hasError()
    assert flag.errors() == [
        ErrorKind.CONVERSION_FAILURE,
        ErrorKind.CONVERSION_FAILURE,
    ]


def test_value_flag_custom_kind_arithmetic_error():
    flag = matched(ValueFlag("r", "Rate", kind=Decimal), ["-r", "abc"])
    assert flag.exists()
    assert flag.errors() == [ErrorKind.CONVERSION_FAILURE]


def test_value_flag_custom_kind():
    flag = matched(ValueFlag("r", "Rate", kind=Decimal), ["-r", "0.1"])
    assert flag.value() == Decimal("0.1")
    assert not flag.hasError()


def test_value_flag_required_missing():
    flag = matched(ValueFlag("i", "", required=True), ["-o", "out.raw"])
    assert not flag.exists()
    assert flag.errors() == [ErrorKind.MISSING_REQUIRED]


def test_value_flag_repeated():
    flag = matched(ValueFlag("t", "", kind=int), ["-t", "1", "-t", "2"])
    assert flag.value() == 2
    assert not flag.hasError()


def test_value_flag_values_may_start_with_dash():
    flag = matched(ValueFlag("n", "", kind=int, arity=2), ["-n", "-1", "-2"])
    assert flag.values() == (-1, -2)
    assert not flag.hasError()


def test_value_flag_usage_fragment():
    assert ValueFlag("i", "").usageFragment() == " [-i x]"
    assert ValueFlag("s", "", arity=3).usageFragment() == " [-s x x x]"
