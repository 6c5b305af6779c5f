import pytest

from bitops import format_bits, parse_bits


def test_format_bits_binary_and_tf():
    path = [True, False, True, True]
    assert format_bits(path) == "1011"
    assert format_bits(path, "tf") == "TFTT"


def test_format_empty_path():
    assert format_bits([]) == ""


def test_format_unknown_style_raises():
    with pytest.raises(ValueError):
        _ = format_bits([True], "hex")


def test_parse_bits_mixed_styles_and_separators():
    assert parse_bits("10 1_1") == [True, False, True, True]
    assert parse_bits("T,F,t,f") == [True, False, True, False]
    assert parse_bits("") == []


def test_parse_bits_rejects_other_characters():
    with pytest.raises(ValueError) as exc:
        _ = parse_bits("10x1")
    assert "position 2" in str(exc.value)


def test_parse_inverts_format():
    path = [False, True, True, False, False]
    assert parse_bits(format_bits(path, "tf")) == path
