from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    UNKNOWN = "unknown_error"
    EMPTY_INPUT = "empty_input"
    READ_FAILURE = "read_failure"
    DECODE_FAILURE = "decode_failure"
    WRITE_FAILURE = "write_failure"
    DIRECTORY_CREATE_FAILURE = "directory_create_failure"


@dataclass
class KitErrorPayload:
    kind: ErrorKind
    message: str
    path: Optional[str] = None
    cause: Optional[Exception] = None


class Base64KitError(Exception):
    def __init__(self, payload: KitErrorPayload):
        super().__init__(payload.message)
        self.kind = payload.kind
        self.path = payload.path
        self.cause = payload.cause


def to_kit_error(err: Exception) -> Base64KitError:
    if isinstance(err, Base64KitError):
        return err
    return Base64KitError(
        KitErrorPayload(kind=ErrorKind.UNKNOWN, message=str(err), cause=err)
    )
