from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_EXTENSION = "png"


@dataclass
class KitConfig:
    default_extension: str = DEFAULT_EXTENSION
    temp_dir: Optional[str] = None
    keep_temp_files: bool = False


def load_config() -> KitConfig:
    return KitConfig(
        default_extension=_env_value("BASE64_KIT_DEFAULT_EXTENSION").strip().lstrip(".")
        or DEFAULT_EXTENSION,
        temp_dir=_env_value("BASE64_KIT_TEMP_DIR") or None,
        keep_temp_files=_env_bool("BASE64_KIT_KEEP_TEMP", False),
    )


def resolve_config(config: Optional[KitConfig]) -> KitConfig:
    if config is not None:
        return config
    return load_config()


def _env_value(name: str) -> str:
    return os.getenv(name, "")


def _env_bool(name: str, default: bool) -> bool:
    raw = _env_value(name).strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")
