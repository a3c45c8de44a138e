import base64

import pytest

from fastcommon.base64codec import Base64Codec

SAMPLES = [b"", b"f", b"fo", b"foo", b"foob", b"fooba", b"foobar", bytes(range(256))]


@pytest.mark.parametrize("data", SAMPLES)
def test_encode_matches_standard(data):
    assert Base64Codec().encode(data) == base64.b64encode(data)


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip(data):
    codec = Base64Codec()
    assert codec.decode(codec.encode(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_encode_without_pad(data):
    codec = Base64Codec()
    encoded = codec.encode(data, pad=False)
    assert encoded == base64.b64encode(data).rstrip(b"=")
    assert codec.decode_auto(encoded) == data


def test_worked_example():
    assert Base64Codec().encode(b"foobar") == b"Zm9vYmFy"
    assert Base64Codec().decode(b"Zm9vYg==") == b"foob"


def test_custom_alphabet_matches_urlsafe():
    data = bytes(range(250, 256)) * 7 + b"\xfb\xff"
    codec = Base64Codec(plus="-", splash="_")
    assert codec.encode(data) == base64.urlsafe_b64encode(data)
    assert codec.decode(codec.encode(data)) == data


def test_custom_pad_char():
    codec = Base64Codec(pad=".")
    encoded = codec.encode(b"ab")
    assert encoded == base64.b64encode(b"ab").replace(b"=", b".")
    assert codec.decode(encoded) == b"ab"


def test_line_wrapping():
    data = bytes(range(100))
    codec = Base64Codec(line_length=16)
    encoded = codec.encode(data)
    lines = encoded.split(b"\n")
    assert all(len(line) <= 16 for line in lines)
    assert all(len(line) == 16 for line in lines[:-1])
    assert b"".join(lines) == base64.b64encode(data)
    assert codec.decode(encoded) == data


def test_custom_line_separator():
    data = bytes(range(60))
    codec = Base64Codec(line_length=8)
    codec.line_separator = "\r\n"
    encoded = codec.encode(data)
    assert encoded.replace(b"\r\n", b"") == base64.b64encode(data)
    assert b"\r\n" in encoded
    assert codec.decode(encoded) == data


def test_line_separator_truncated():
    codec = Base64Codec()
    codec.line_separator = "x" * 40
    assert codec.line_separator == b"x" * 15


def test_set_line_length_rounds_down():
    codec = Base64Codec()
    codec.line_length = 10
    assert codec.line_length == 8


@pytest.mark.parametrize("line_length", [0, 4, 8, 76])
@pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 57, 58, 200])
def test_encode_length_matches_output(line_length, size):
    codec = Base64Codec(line_length=line_length)
    codec.line_separator = "\r\n"
    assert codec.encode_length(size) == len(codec.encode(bytes(size)))


def test_decode_skips_foreign_characters():
    codec = Base64Codec()
    assert codec.decode(b"Zm9v\nYmFy\r\n") == codec.decode(b"Zm9vYmFy")
    assert codec.decode("Zm 9v Ym Fy") == b"foobar"


def test_decode_rejects_partial_group():
    with pytest.raises(ValueError):
        Base64Codec().decode(b"Zm9vY")


def test_decode_auto_pads_missing_characters():
    codec = Base64Codec()
    for data in SAMPLES:
        assert codec.decode_auto(base64.b64encode(data).rstrip(b"=")) == data


def test_negative_line_length_rejected():
    with pytest.raises(ValueError):
        Base64Codec(line_length=-4)


def test_bad_alphabet_char_rejected():
    with pytest.raises(ValueError):
        Base64Codec(plus="ab")