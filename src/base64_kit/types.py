from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ErrorKind


@dataclass(frozen=True)
class NormalizedInput:
    payload: str
    path: str


@dataclass
class ConversionResult:
    path: str = ""
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.path)
