from .codec import encode_bytes, raw_decode
from .config import KitConfig, load_config
from .errors import Base64KitError, ErrorKind, KitErrorPayload
from .files import (
    cleanup_temp_files,
    decode_base64_to_path,
    decode_base64_to_stream,
    decode_base64_to_temp_file,
    encode_file_to_base64,
    encode_file_to_data_uri,
    normalize_input,
    try_decode_base64_to_path,
)
from .media import EXTENSION_RULES, infer_extension, mime_fragment, strip_data_uri_prefix
from .types import ConversionResult, NormalizedInput

__all__ = [
    "encode_file_to_base64",
    "encode_file_to_data_uri",
    "decode_base64_to_temp_file",
    "decode_base64_to_stream",
    "decode_base64_to_path",
    "try_decode_base64_to_path",
    "cleanup_temp_files",
    "infer_extension",
    "mime_fragment",
    "strip_data_uri_prefix",
    "normalize_input",
    "encode_bytes",
    "raw_decode",
    "EXTENSION_RULES",
    "KitConfig",
    "load_config",
    "ConversionResult",
    "NormalizedInput",
    "Base64KitError",
    "ErrorKind",
    "KitErrorPayload",
]
