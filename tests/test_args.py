import pytest

from rep.args import ParsedArgs, parse_args, usage_string
from rep.errors import InvalidArgumentsError, RepError
from rep.flags import Flag


def test_parse_args_basic():
    result = parse_args(["program", "pattern", "file.txt"])
    assert result.flags == []
    assert result.pattern == "pattern"
    assert result.file_patterns == ["file.txt"]


def test_parse_args_with_flags():
    result = parse_args(["program", "-n", "-i", "pattern", "file.txt"])
    assert result.flags == [Flag.LINE_NUMBERS, Flag.CASE_INSENSITIVE]
    assert result.pattern == "pattern"
    assert result.file_patterns == ["file.txt"]


def test_parse_args_multiple_files():
    result = parse_args(["program", "-n", "pattern", "file1.txt", "file2.txt"])
    assert result.flags == [Flag.LINE_NUMBERS]
    assert result.pattern == "pattern"
    assert result.file_patterns == ["file1.txt", "file2.txt"]


def test_parse_args_mixed_flag_order():
    result = parse_args(["program", "-n", "pattern", "-i", "file.txt"])
    assert result == ParsedArgs(
        flags=[Flag.LINE_NUMBERS, Flag.CASE_INSENSITIVE],
        pattern="pattern",
        file_patterns=["file.txt"],
    )


@pytest.mark.parametrize("args", [["program"], ["program", "pattern"]])
def test_parse_args_insufficient_args(args):
    with pytest.raises(InvalidArgumentsError) as info:
        parse_args(args)
    assert info.value.message == usage_string("program")


def test_parse_args_empty():
    with pytest.raises(InvalidArgumentsError) as info:
        parse_args([])
    assert info.value.message == "No arguments provided"


def test_parse_args_only_flags_after_pattern():
    with pytest.raises(RepError):
        parse_args(["program", "-n", "pattern"])


def test_usage_string_names_program():
    assert usage_string("rep") == "Usage: rep [-n] [-i] [-c] [-v] <pattern> <filename>"