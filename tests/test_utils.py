from datetime import timedelta

import pytest

from onsclient.common import utils


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3000", 3000),
        (" 42 ", 42),
        ("+7", 7),
        ("-2147483648", -(2**31)),
        ("2147483647", 2**31 - 1),
        ("2147483648", None),
        ("1_000", None),
        ("\u0663\u0660\u0660\u0660", None),
        (" \u00a042", None),
        ("12abc", None),
        ("", None),
        (None, None),
    ],
)
def test_simple_atoi(value, expected):
    assert utils.simple_atoi(value) == expected


def test_to_millis():
    assert utils.to_millis(250) == 250
    assert utils.to_millis(timedelta(seconds=3)) == 3000
    assert utils.to_millis(timedelta(microseconds=1500)) == 1


@pytest.mark.parametrize("value", ["1_000", "٣٠", "2147483648", "4x", None])
def test_parse_int32_rejects(value):
    with pytest.raises(ValueError):
        utils.parse_int32(value)


def test_parse_int32():
    assert utils.parse_int32(" -12 ") == -12
