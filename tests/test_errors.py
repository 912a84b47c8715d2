from base64_kit import Base64KitError, ConversionResult, ErrorKind, KitErrorPayload
from base64_kit.errors import to_kit_error


def test_to_kit_error_passes_kit_errors_through():
    err = Base64KitError(KitErrorPayload(kind=ErrorKind.WRITE_FAILURE, message="denied", path="/x"))
    assert to_kit_error(err) is err
    assert err.path == "/x"
    assert str(err) == "denied"


def test_to_kit_error_wraps_unknown_exceptions():
    cause = RuntimeError("boom")
    err = to_kit_error(cause)
    assert err.kind is ErrorKind.UNKNOWN
    assert err.cause is cause
    assert str(err) == "boom"


def test_error_kind_values_are_strings():
    assert ErrorKind.DECODE_FAILURE == "decode_failure"


def test_conversion_result_ok():
    assert ConversionResult(path="/tmp/a.png").ok
    assert not ConversionResult(error=ErrorKind.EMPTY_INPUT).ok
    assert not ConversionResult().ok
