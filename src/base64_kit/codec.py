from __future__ import annotations

import base64
import binascii

from .errors import Base64KitError, ErrorKind, KitErrorPayload


def encode_bytes(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def raw_decode(payload: str) -> bytes:
    # bytes are already unsigned, no per-byte correction needed
    try:
        return base64.b64decode(payload)
    except (binascii.Error, ValueError) as exc:
        raise Base64KitError(
            KitErrorPayload(
                kind=ErrorKind.DECODE_FAILURE,
                message=f"Invalid Base64 payload: {exc}",
                cause=exc,
            )
        ) from exc
