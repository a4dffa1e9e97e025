import pytest

from tabfill.normalize import comparing_value
from tabfill.prefix import longest_common_prefix


def test_empty_sequence():
    assert longest_common_prefix([]) == ""


def test_single_word():
    assert longest_common_prefix(["x"]) == "x"


def test_empty_first_word():
    assert longest_common_prefix(["", "abc"]) == ""


@pytest.mark.parametrize(
    "words, expected",
    [
        (["halt", "help", "history"], "h"),
        (["help", "helm"], "hel"),
        (["AETHERWARP", "AETHERZOOM"], "AETHER"),
        (["abc", "abc"], "abc"),
        (["abc", "ab"], "ab"),
        (["ab", "abc"], "ab"),
        (["abc", "xyz"], ""),
        (["git commit", "git checkout"], "git c"),
    ],
)
def test_shared_prefix(words, expected):
    assert longest_common_prefix(words) == expected


@pytest.mark.parametrize(
    "words",
    [
        ["apple", "application", "apply"],
        ["cd src/", "cd scripts/", "cd setup.py"],
        ["Foo", "foo"],
    ],
)
def test_prefix_is_shared_and_maximal(words):
    prefix = longest_common_prefix(words)
    assert all(word.startswith(prefix) for word in words)
    for word in words:
        if len(word) > len(prefix):
            longer = word[: len(prefix) + 1]
            assert not all(other.startswith(longer) for other in words)


def test_tuple_input():
    assert longest_common_prefix(("start", "stop")) == "st"


def test_comparing_value():
    assert comparing_value("FoO", strict=False) == "foo"
    assert comparing_value("FoO", strict=True) == "FoO"
