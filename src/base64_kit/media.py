from __future__ import annotations

import logging
import mimetypes
from typing import Optional, Tuple

from .config import KitConfig, resolve_config

DATA_URI_MARKER = ";base64,"
DEFAULT_MEDIA_TYPE = "application/octet-stream"

# Evaluated in order, first needle contained in the fragment wins.
EXTENSION_RULES: Tuple[Tuple[str, str], ...] = (
    ("wordprocessing", "docx"),
    ("presentation", "pptx"),
    ("spreadsheet", "xlsx"),
    ("excel", "xls"),
    ("msword", "doc"),
    ("powerpoint", "ppt"),
    # HEIC images are also sent as octet-stream.
    ("octet-stream", "rar"),
    ("zip", "zip"),
    ("plain", "txt"),
    ("x-icon", "icon"),
    ("svg", "svg"),
)

logger = logging.getLogger(__name__)


def strip_data_uri_prefix(value: str) -> str:
    _, marker, payload = value.partition(DATA_URI_MARKER)
    if not marker or not payload:
        return value
    return payload


def mime_fragment(value: str) -> Optional[str]:
    """Return the text between the first ``/`` and the data-URI marker after it.

    ``data:image/svg+xml;base64,...`` yields ``svg+xml``. ``None`` when the
    value carries no usable prefix.
    """
    slash = value.find("/")
    if slash < 0:
        return None
    start = slash + 1
    end = value.find(DATA_URI_MARKER, start)
    if end < 0:
        return None
    return value[start:end] or None


def extension_for_fragment(fragment: str) -> str:
    for needle, extension in EXTENSION_RULES:
        if needle in fragment:
            return extension
    return fragment


def infer_extension(value: str, *, config: Optional[KitConfig] = None) -> str:
    """Map the MIME fragment of a prefixed Base64 string to a file extension.

    The value must still carry its ``<type>/<fragment>;base64,`` prefix. Without
    one the configured default extension (``png``) is returned and a warning is
    logged.
    """
    fragment = mime_fragment(value)
    if fragment is None:
        default = resolve_config(config).default_extension
        logger.warning(
            "Base64 value has no data-URI prefix and the file type cannot be determined; "
            "falling back to .%s",
            default,
        )
        return default
    return extension_for_fragment(fragment)


def guess_media_type(name: Optional[str]) -> str:
    if not name:
        return DEFAULT_MEDIA_TYPE
    media_type, _ = mimetypes.guess_type(name, strict=False)
    return media_type or DEFAULT_MEDIA_TYPE


def build_data_uri(payload: str, media_type: str) -> str:
    return f"data:{media_type}{DATA_URI_MARKER}{payload}"
