import pytest

from hostprobe.textutil import (
    ends_with,
    join,
    ltrim,
    rsplit1,
    rtrim,
    split,
    split1,
    starts_with,
    tolower,
    toupper,
    transform,
    trim,
)

NULL = "\0"


def test_join():
    assert join([], "") == ""
    assert join(["a"], "") == "a"
    assert join(["a"], "1") == "a"
    assert join(["a", "b"], "1") == "a1b"
    assert join(["a", "b", "c"], "\b1") == "a\b1b\b1c"
    assert join([NULL, NULL], NULL) == NULL + NULL + NULL


def test_transform_sets():
    assert transform(set(), lambda x: x + x) == set()
    assert transform({1, 2, 3}, lambda x: x + x) == {2, 4, 6}


def test_transform_list_keeps_order_and_type():
    result = transform(["a", "b"], lambda x: x + x)
    assert result == ["aa", "bb"]
    assert isinstance(result, list)


def test_transform_unsupported_container():
    with pytest.raises(TypeError):
        transform({"a": 1}, lambda x: x)


def test_case_conversion():
    assert tolower("AbCd") == "abcd"
    assert toupper("AbCd") == "ABCD"


def test_trim():
    assert trim("", "") == ""
    assert trim("aa123a", "") == "aa123a"
    assert trim("aa123a", "abc") == "123"
    assert trim("aa123a", "XYZ") == "aa123a"
    assert trim(NULL + NULL + "123" + NULL + "abc" + NULL, NULL) == "123" + NULL + "abc"


def test_ltrim():
    assert ltrim("", "") == ""
    assert ltrim("", "abc") == ""
    assert ltrim("a1b2c3d4", "abc") == "1b2c3d4"
    assert ltrim("ab1b2c3d4", "abc") == "1b2c3d4"
    assert ltrim("abc1b2c3d4", "abc") == "1b2c3d4"
    assert ltrim(NULL + NULL + "abc", "a" + NULL) == "bc"


def test_rtrim():
    assert rtrim("", "") == ""
    assert rtrim("", "abc") == ""
    assert rtrim("4d3c2b1a", "abc") == "4d3c2b1"
    assert rtrim("4d3c2b1ba", "abc") == "4d3c2b1"
    assert rtrim("4d3c2b1cba", "abc") == "4d3c2b1"
    assert rtrim("cba" + NULL + NULL, "a" + NULL) == "cb"


def test_trim_default_whitespace_is_idempotent():
    text = " \t\f\v\n\rabc \r\n"
    once = trim(text)
    assert trim(once) == once
    assert once.strip(" \t\f\v\n\r") == once


@pytest.mark.parametrize(
    "text, delim, expected",
    [
        ("", "", ("", "")),
        (" a", " ", ("", "a")),
        (" a b", " ", (" a", "b")),
        ("a  b", " ", ("a ", "b")),
        ("a   b", " ", ("a  ", "b")),
        ("a b c", " ", ("a b", "c")),
        ("a b c ", " ", ("a b c", "")),
        ("abc", " ", ("", "abc")),
    ],
)
def test_rsplit1_with_delim(text, delim, expected):
    assert rsplit1(text, delim) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ("", "")),
        ("\ta", ("", "a")),
        ("\ta\vb", ("\ta", "b")),
        ("a  b", ("a ", "b")),
        ("a   b", ("a  ", "b")),
        ("a b c", ("a b", "c")),
        ("a b c ", ("a b c", "")),
        ("abc", ("", "abc")),
    ],
)
def test_rsplit1_without_delim(text, expected):
    assert rsplit1(text) == expected


@pytest.mark.parametrize(
    "text, delim, expected",
    [
        ("a:b:c", "", ["a:b:c"]),
        ("", "", [""]),
        ("a:b:c", ":", ["a", "b", "c"]),
        ("a:b::c", ":", ["a", "b", "", "c"]),
        ("a:b:::c", ":", ["a", "b", "", "", "c"]),
        (":a:b:c", ":", ["", "a", "b", "c"]),
        ("::a:b:c", ":", ["", "", "a", "b", "c"]),
        ("a:b:c:", ":", ["a", "b", "c", ""]),
        ("a:b:c::", ":", ["a", "b", "c", "", ""]),
        ("", ":", [""]),
        ("12345", "1", ["", "2345"]),
        ("12345", "23", ["1", "45"]),
        ("12345", "a", ["12345"]),
        ("12345", "", ["12345"]),
    ],
)
def test_split_with_delim(text, delim, expected):
    assert split(text, delim) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a b c", ["a", "b", "c"]),
        ("a\t b c", ["a", "b", "c"]),
        ("a    b       c", ["a", "b", "c"]),
        ("   a    b \t \n c", ["a", "b", "c"]),
        ("\n   a    b       c\t ", ["a", "b", "c"]),
        ("", []),
        ("\t\v\n\r", []),
        (" \n ", []),
    ],
)
def test_split_without_delim(text, expected):
    assert split(text) == expected


def test_split_join_round_trip():
    text = "x::y:z:"
    assert join(split(text, ":"), ":") == text


@pytest.mark.parametrize(
    "text, delim, expected",
    [
        ("", " ", ("", "")),
        (" a", " ", ("", "a")),
        (" a b", " ", ("", "a b")),
        ("a  b", " ", ("a", " b")),
        ("a   b", " ", ("a", "  b")),
        ("a b c", " ", ("a", "b c")),
    ],
)
def test_split1_with_delim(text, delim, expected):
    assert split1(text, delim) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ("", "")),
        ("\ta", ("", "a")),
        ("\ta b", ("", "a b")),
        ("a  b", ("a", "b")),
        ("a   b", ("a", "b")),
        ("a b c", ("a", "b c")),
    ],
)
def test_split1_without_delim(text, expected):
    assert split1(text) == expected


def test_starts_with():
    assert starts_with("abcd", "ab")
    assert not starts_with("abcd", "cd")


def test_ends_with():
    assert ends_with("abcd", "cd")
    assert not ends_with("abcd", "ab")