import base64

import pytest
from hypothesis import given, strategies as st

from base64_kit import Base64KitError, ErrorKind, encode_bytes, raw_decode


def test_encode_bytes_has_no_line_breaks():
    encoded = encode_bytes(bytes(range(256)) * 4)
    assert "\n" not in encoded
    assert encoded == base64.b64encode(bytes(range(256)) * 4).decode("ascii")


def test_raw_decode_high_bytes_are_unsigned():
    data = bytes([0x00, 0x7F, 0x80, 0xFE, 0xFF])
    decoded = raw_decode(encode_bytes(data))
    assert decoded == data
    assert all(0 <= byte <= 255 for byte in decoded)


@given(st.binary(max_size=512))
def test_raw_decode_inverts_encode(data):
    assert raw_decode(encode_bytes(data)) == data


def test_raw_decode_rejects_bad_padding():
    with pytest.raises(Base64KitError) as info:
        raw_decode("abc")
    assert info.value.kind is ErrorKind.DECODE_FAILURE
    assert info.value.cause is not None


def test_raw_decode_rejects_non_ascii():
    with pytest.raises(Base64KitError) as info:
        raw_decode("AAAA\u00e9")
    assert info.value.kind is ErrorKind.DECODE_FAILURE
