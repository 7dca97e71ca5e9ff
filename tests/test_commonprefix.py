import pytest

from termcli.commonprefix import common_prefix


def test_single_string_is_its_own_prefix():
    assert common_prefix(["hello"]) == "hello"


def test_shorter_string_is_prefix():
    assert common_prefix(["foobar", "foo", "foobaz"]) == "foo"


def test_no_common_prefix():
    assert common_prefix(["abc", "xyz"]) == ""


def test_with_empty_string():
    assert common_prefix(["", "abc"]) == ""


@pytest.mark.parametrize(
    "strings",
    [["help", "hello", "helm"], ["sub", "subsub"], ["a", "b", "c"], ["same", "same"]],
)
def test_result_is_longest_shared_prefix(strings):
    prefix = common_prefix(strings)
    assert all(s.startswith(prefix) for s in strings)
    shortest = min(strings, key=len)
    if len(prefix) < len(shortest):
        extended = shortest[: len(prefix) + 1]
        assert not all(s.startswith(extended) for s in strings)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        common_prefix([])