"""Shared plumbing for the endpoint mixins."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from veryfi_sdk.config import ClientConfig
from veryfi_sdk.errors import ConfigurationError

_SCALARS = (str, int, float, bool, type(None))

# Envelope keys peeled off successful responses
DATA = ("data",)
LIST = ("data", "results")
RAW = ()


def merge_fields(request_arguments: dict, fields: Mapping[str, Any], allow_nested: bool = False) -> dict:
    """
    Merge caller supplied fields over the computed request arguments.

    The caller wins on key collision. Values must be scalars or flat lists of
    scalars unless the target endpoint accepts nested objects.
    """
    if not allow_nested:
        for key, value in fields.items():
            if isinstance(value, (list, tuple)):
                if all(isinstance(item, _SCALARS) for item in value):
                    continue
            elif isinstance(value, _SCALARS):
                continue
            raise TypeError(f"Unsupported value for {key!r}: {type(value).__name__}")
    request_arguments.update(fields)
    return request_arguments


def file_name_of(file_path: str | os.PathLike) -> str:
    return Path(file_path).name


class ResourceMixin:
    """Base for the endpoint mixins. Concrete clients provide _request."""

    config: ClientConfig

    def _request(
        self,
        http_verb: str,
        endpoint_name: str,
        request_arguments: dict | None = None,
        params: dict | None = None,
        has_files: bool = False,
        envelope: tuple[str, ...] = DATA,
    ):
        raise NotImplementedError

    def _check_w2_version(self):
        if self.config.api_version != "v8":
            raise ConfigurationError(
                f"w2 is only supported on v8, client is configured for {self.config.api_version}"
            )
