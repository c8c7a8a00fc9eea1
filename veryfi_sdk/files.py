"""Helpers for turning local files into request payloads."""

import os
from pathlib import Path

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".pdf": "application/pdf",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


def get_mime_type(file_name: str | os.PathLike) -> str:
    return MIME_TYPES.get(Path(file_name).suffix.lower(), DEFAULT_MIME_TYPE)


def check_mime_type(base64_string: str) -> bool:
    """True if the string already carries one of the known data: prefixes."""
    return any(
        base64_string.startswith(f"data:{mime_type};base64,")
        for mime_type in set(MIME_TYPES.values())
    )


def add_mime_type(base64_string: str, file_name: str | os.PathLike) -> str:
    """
    Ensure a base64 string carries a data: MIME type prefix.

    An existing prefix is kept as is, even when it disagrees with the file
    name; otherwise the type is derived from the file name extension.
    """
    if base64_string.startswith("data:"):
        return base64_string
    return f"data:{get_mime_type(file_name)};base64,{base64_string}"
