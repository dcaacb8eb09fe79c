import pytest

from tokencheck.codec import BLACK, WHITE, Color, InvalidColorFormat, decode, encode


def test_decode_with_and_without_hash_are_equal():
    assert decode("#1f2937") == decode("1F2937")
    assert decode("#1f2937").rgb == (0x1F, 0x29, 0x37)


@pytest.mark.parametrize("bad", ["bad", "#12345", "#1234567", "#fff", "#GGGGGG", "", " #1f2937"])
def test_decode_rejects_malformed(bad):
    with pytest.raises(InvalidColorFormat):
        decode(bad)


def test_decode_rejects_non_string():
    with pytest.raises(InvalidColorFormat):
        decode(0x1F2937)  # type: ignore[arg-type]


def test_invalid_color_format_is_value_error():
    assert issubclass(InvalidColorFormat, ValueError)


def test_hex_output_is_uppercase():
    assert decode("#abcdef").hex == "#ABCDEF"
    assert str(Color(1, 2, 3)) == "#010203"


def test_encode_clamps_and_rounds():
    assert encode(-10, 300, 127.4) == "#00FF7F"
    assert encode(0.6, 254.6, 16) == "#01FF10"


def test_encode_rounds_ties_up():
    assert encode(0.5, 2.5, 254.5) == "#0103FF"
    assert encode(98.5, 127.5, 0.49) == "#638000"


def test_color_rejects_out_of_range_channels():
    with pytest.raises(InvalidColorFormat):
        Color(256, 0, 0)
    with pytest.raises(InvalidColorFormat):
        Color(0, -1, 0)
    with pytest.raises(InvalidColorFormat):
        Color(0, 0, 1.5)  # type: ignore[arg-type]


def test_color_is_immutable():
    c = decode("#102030")
    with pytest.raises(AttributeError):
        c.r = 0  # type: ignore[misc]


def test_extreme_constants():
    assert BLACK.hex == "#000000"
    assert WHITE.hex == "#FFFFFF"
    assert Color.from_hex("ffffff") == WHITE
