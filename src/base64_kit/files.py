from __future__ import annotations

import atexit
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import BinaryIO, Optional, Set, Union

from .codec import encode_bytes, raw_decode
from .config import KitConfig, resolve_config
from .errors import Base64KitError, ErrorKind, KitErrorPayload, to_kit_error
from .media import build_data_uri, guess_media_type, infer_extension, strip_data_uri_prefix
from .paths import has_extension, join_folder, parent_candidates
from .types import ConversionResult, NormalizedInput

FileSource = Union[str, "os.PathLike[str]", BinaryIO]

logger = logging.getLogger(__name__)

_temp_files: Set[Path] = set()


def encode_file_to_base64(source: FileSource) -> str:
    """Read a whole file (path or open binary handle) and return its Base64 text.

    An unreadable source is logged and encoded as empty content, so the result
    is ``""`` rather than an exception.
    """
    return encode_bytes(_read_source(source))


def encode_file_to_data_uri(source: FileSource, mime_type: Optional[str] = None) -> str:
    """Like :func:`encode_file_to_base64` with a ``data:<mime>;base64,`` prefix.

    Empty or unreadable content gives ``""``: a bare prefix would be decoded as
    if it were the payload.
    """
    payload = encode_file_to_base64(source)
    if not payload:
        return ""
    media_type = mime_type or guess_media_type(_source_name(source))
    return build_data_uri(payload, media_type)


def normalize_input(
    value: Optional[str],
    target_path: str,
    *,
    config: Optional[KitConfig] = None,
) -> Optional[NormalizedInput]:
    if value is None or not value.strip():
        return None
    path = target_path
    if not has_extension(target_path):
        # inference needs the prefix, so use the unstripped value
        path = f"{target_path}.{infer_extension(value, config=config)}"
    return NormalizedInput(payload=strip_data_uri_prefix(value), path=path)


def decode_base64_to_temp_file(
    value: Optional[str],
    *,
    config: Optional[KitConfig] = None,
) -> Optional[Path]:
    """Decode into a fresh temporary file named after the inferred extension.

    The file is deleted when the interpreter exits unless
    ``KitConfig.keep_temp_files`` is set. Cleanup at exit is best effort: it
    does not happen on ``os._exit`` or when the process is killed. Returns
    ``None`` on any failure.
    """
    config = resolve_config(config)
    try:
        if value is None or not value.strip():
            raise Base64KitError(
                KitErrorPayload(kind=ErrorKind.EMPTY_INPUT, message="Base64 value is empty")
            )
        data = raw_decode(strip_data_uri_prefix(value))
        extension = infer_extension(value, config=config)
        path = _write_temp_file(data, extension, config.temp_dir)
    except Exception as exc:
        err = to_kit_error(exc)
        logger.error(
            "Failed to convert Base64 to a temporary file (%s): %s",
            err.kind.value,
            err,
            exc_info=err.cause,
        )
        return None
    if not config.keep_temp_files:
        _temp_files.add(path)
    logger.debug("Wrote %d bytes to temporary file %s", len(data), path)
    return path


def decode_base64_to_stream(
    value: Optional[str],
    *,
    config: Optional[KitConfig] = None,
) -> Optional[BinaryIO]:
    path = decode_base64_to_temp_file(value, config=config)
    if path is None:
        return None
    try:
        return path.open("rb")
    except OSError as exc:
        logger.error("Failed to open temporary file %s: %s", path, exc)
        return None


def try_decode_base64_to_path(
    value: Optional[str],
    folder_or_path: str,
    file_name: Optional[str] = None,
    *,
    config: Optional[KitConfig] = None,
) -> ConversionResult:
    if file_name is None:
        target = folder_or_path
    else:
        target = join_folder(folder_or_path, file_name)
    try:
        saved = _save(value, target, config)
    except Exception as exc:
        err = to_kit_error(exc)
        logger.error(
            "Failed to save Base64 content to %s (%s): %s",
            err.path or target,
            err.kind.value,
            err,
            exc_info=err.cause,
        )
        return ConversionResult(error=err.kind)
    return ConversionResult(path=saved)


def decode_base64_to_path(
    value: Optional[str],
    folder_or_path: str,
    file_name: Optional[str] = None,
    *,
    config: Optional[KitConfig] = None,
) -> str:
    """Decode ``value`` and save it, returning the saved path or ``""``.

    Call as ``(value, full_path)`` or ``(value, folder, file_name)``. Paths may
    use ``/`` or ``\\``. A target without an extension gets one from
    :func:`infer_extension`.
    """
    return try_decode_base64_to_path(value, folder_or_path, file_name, config=config).path


def cleanup_temp_files() -> int:
    removed = 0
    while _temp_files:
        path = _temp_files.pop()
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as exc:
            logger.warning("Could not delete temporary file %s: %s", path, exc)
            continue
        removed += 1
    return removed


atexit.register(cleanup_temp_files)


def _save(value: Optional[str], target: str, config: Optional[KitConfig]) -> str:
    normalized = normalize_input(value, target, config=config)
    if normalized is None:
        raise Base64KitError(
            KitErrorPayload(
                kind=ErrorKind.EMPTY_INPUT,
                message="Base64 value is empty, nothing saved",
                path=target,
            )
        )
    _ensure_parent(normalized.path)
    _write_file(normalized.path, normalized.payload)
    return normalized.path


def _ensure_parent(path: str) -> None:
    candidates = parent_candidates(path)
    if not candidates:
        return
    for directory in candidates:
        if _make_dirs(directory):
            return
    # the write is still attempted and reports its own failure
    logger.error(
        "Failed to create folder %s (%s)",
        candidates[-1],
        ErrorKind.DIRECTORY_CREATE_FAILURE.value,
    )


def _make_dirs(directory: str) -> bool:
    folder = Path(directory)
    if folder.is_dir():
        return True
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.debug("Could not create %s: %s", directory, exc)
        return False
    return True


def _write_file(path: str, payload: str) -> None:
    data = raw_decode(payload)
    try:
        with open(path, "wb") as out:
            out.write(data)
    except OSError as exc:
        raise Base64KitError(
            KitErrorPayload(
                kind=ErrorKind.WRITE_FAILURE,
                message=str(exc),
                path=path,
                cause=exc,
            )
        ) from exc
    logger.debug("Saved %d bytes to %s", len(data), path)


def _write_temp_file(data: bytes, extension: str, directory: Optional[str]) -> Path:
    prefix = str(int(time.time() * 1000))
    try:
        temp = tempfile.NamedTemporaryFile(
            delete=False,
            prefix=prefix,
            suffix=f".{extension}",
            dir=directory,
        )
    except OSError as exc:
        raise Base64KitError(
            KitErrorPayload(kind=ErrorKind.WRITE_FAILURE, message=str(exc), cause=exc)
        ) from exc
    path = Path(temp.name)
    try:
        temp.write(data)
        temp.flush()
    except OSError as exc:
        temp.close()
        path.unlink(missing_ok=True)
        raise Base64KitError(
            KitErrorPayload(
                kind=ErrorKind.WRITE_FAILURE,
                message=str(exc),
                path=str(path),
                cause=exc,
            )
        ) from exc
    finally:
        temp.close()
    return path


def _read_source(source: FileSource) -> bytes:
    try:
        if hasattr(source, "read"):
            data = source.read()
        else:
            data = Path(source).read_bytes()
    except (OSError, ValueError) as exc:
        # ValueError: the handle is already closed
        _log_read_failure(source, exc)
        return b""
    if not isinstance(data, bytes):
        _log_read_failure(source, f"expected bytes, got {type(data).__name__}")
        return b""
    return data


def _log_read_failure(source: FileSource, reason: object) -> None:
    logger.error(
        "Failed to read %s (%s): %s",
        _source_name(source) or source,
        ErrorKind.READ_FAILURE.value,
        reason,
    )


def _source_name(source: FileSource) -> Optional[str]:
    if hasattr(source, "read"):
        name = getattr(source, "name", None)
        return name if isinstance(name, str) else None
    return os.fspath(source)
