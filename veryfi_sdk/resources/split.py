"""
Split document sets (/documents-set/) and classification (/classify/).

Both endpoints take a file and return a summary of what the API found in
it rather than fully extracted data.
"""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from veryfi_sdk.files import add_mime_type
from veryfi_sdk.resources._base import LIST, ResourceMixin, file_name_of, merge_fields


class SplitMixin(ResourceMixin):
    def split_document(self, file_path: str | os.PathLike, **kwargs):
        """Split a multi-document PDF from a file on disk into a document set."""
        return self.split_document_from_stream(Path(file_path), file_name_of(file_path), **kwargs)

    def split_document_from_stream(self, file: BinaryIO | bytes | os.PathLike, file_name: str, **kwargs):
        request_arguments = {"file_name": file_name, "file": file}
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/documents-set/", request_arguments, has_files=True)

    def split_document_from_buffer(self, file_buffer: bytes, file_name: str, **kwargs):
        return self.split_document_from_stream(bytes(file_buffer), file_name, **kwargs)

    def split_document_from_base64(self, file_base64_string: str, file_name: str, **kwargs):
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/documents-set/", request_arguments)

    def split_document_from_url(
        self,
        file_url: str | None = None,
        file_urls: Sequence[str] | None = None,
        **kwargs,
    ):
        request_arguments = {
            "file_url": file_url,
            "file_urls": list(file_urls) if file_urls is not None else None,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/documents-set/", request_arguments)

    def get_split_documents(self, page: int = 1, page_size: int = 50, **kwargs):
        request_arguments = {"page": page, "page_size": page_size}
        return self._request("GET", "/documents-set/", request_arguments, params=kwargs or None, envelope=LIST)

    def get_split_document(self, document_id: int | str, **kwargs):
        return self._request(
            "GET", f"/documents-set/{document_id}/", {"id": document_id}, params=kwargs or None
        )


class ClassifyMixin(ResourceMixin):
    def classify_document(self, file_path: str | os.PathLike, **kwargs):
        """Ask the API which document type a file on disk holds."""
        return self.classify_document_from_stream(Path(file_path), file_name_of(file_path), **kwargs)

    def classify_document_from_stream(self, file: BinaryIO | bytes | os.PathLike, file_name: str, **kwargs):
        request_arguments = {"file_name": file_name, "file": file}
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/classify/", request_arguments, has_files=True)

    def classify_document_from_buffer(self, file_buffer: bytes, file_name: str, **kwargs):
        return self.classify_document_from_stream(bytes(file_buffer), file_name, **kwargs)

    def classify_document_from_base64(self, file_base64_string: str, file_name: str, **kwargs):
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/classify/", request_arguments)

    def classify_document_from_url(
        self,
        file_url: str | None = None,
        file_urls: Sequence[str] | None = None,
        **kwargs,
    ):
        request_arguments = {
            "file_url": file_url,
            "file_urls": list(file_urls) if file_urls is not None else None,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/classify/", request_arguments)
