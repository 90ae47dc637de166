import pytest

from keypair_tool.util.utils import b58encode_str, format_byte_array, parse_byte_array


def test_parse_byte_array_with_brackets():
    assert parse_byte_array("[1, 2, 255]") == bytes([1, 2, 255])


def test_parse_byte_array_without_brackets_and_spaces():
    assert parse_byte_array(" 0,10 ,  20\n") == bytes([0, 10, 20])


def test_parse_byte_array_empty():
    assert parse_byte_array("[]") == b""


@pytest.mark.parametrize("text", ["[1, two]", "[1, 256]", "[-1]", "[1,,2]"])
def test_parse_byte_array_rejects_bad_values(text):
    with pytest.raises(ValueError):
        parse_byte_array(text)


def test_format_byte_array():
    assert format_byte_array(bytes([0, 1, 255])) == "[0, 1, 255]"
    assert format_byte_array(b"") == "[]"


def test_format_then_parse():
    data = bytes(range(64))
    assert parse_byte_array(format_byte_array(data)) == data


def test_b58encode_str():
    assert b58encode_str(bytes(32)) == "1" * 32
    assert b58encode_str(b"hello world") == "StV1DL6CwTryKyV"


@pytest.mark.parametrize("text", ["[[1]]", "[[1_0]]", "[1_0]", "[+5]", "[ 1 2 ]", "[٣]"])
def test_parse_byte_array_accepts_only_plain_decimals(text):
    with pytest.raises(ValueError):
        parse_byte_array(text)


def test_parse_byte_array_strips_one_bracket_pair():
    assert parse_byte_array("  [ 7 ]  ") == bytes([7])
