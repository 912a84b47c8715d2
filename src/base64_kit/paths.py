from __future__ import annotations

from typing import List

WINDOWS_SEPARATOR = "\\"
POSIX_SEPARATOR = "/"


def file_name_of(path: str) -> str:
    """File-name component of ``path``, trying ``\\`` before ``/``."""
    for separator in (WINDOWS_SEPARATOR, POSIX_SEPARATOR):
        if separator in path:
            name = path.rsplit(separator, 1)[1]
            if name:
                return name
    if WINDOWS_SEPARATOR in path or POSIX_SEPARATOR in path:
        return ""
    return path


def has_extension(path: str) -> bool:
    return "." in file_name_of(path)


def join_folder(folder: str, file_name: str) -> str:
    if folder.endswith(WINDOWS_SEPARATOR) or folder.endswith(POSIX_SEPARATOR):
        return folder + file_name
    return folder + POSIX_SEPARATOR + file_name


def parent_candidates(path: str) -> List[str]:
    """Containing directories to try for ``path``, ``/`` style first.

    A path written with only one style yields one candidate. A leading
    separator with nothing before it resolves to that separator (the root).
    """
    candidates: List[str] = []
    for separator in (POSIX_SEPARATOR, WINDOWS_SEPARATOR):
        if separator not in path:
            continue
        head = path.rsplit(separator, 1)[0] or separator
        if head not in candidates:
            candidates.append(head)
    return candidates
