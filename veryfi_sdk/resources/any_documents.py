"""Any document type described by a blueprint: the /any-documents/ endpoint."""

import os
from pathlib import Path
from typing import BinaryIO

from veryfi_sdk.files import add_mime_type
from veryfi_sdk.resources._base import LIST, RAW, ResourceMixin, file_name_of, merge_fields


class AnyDocumentsMixin(ResourceMixin):
    def process_any_document(
        self,
        file_path: str | os.PathLike,
        blueprint_name: str,
        max_pages_to_process: int = 20,
        **kwargs,
    ):
        """
        Process a document against a blueprint.

        Args:
            file_path: Path on disk to a file to submit for data extraction
            blueprint_name: Name of the extraction blueprint, e.g. "us_driver_license"
            max_pages_to_process: How many pages to read, starting from page 1
            **kwargs: Additional request parameters

        Returns:
            Data extracted from the document
        """
        return self.process_any_document_from_stream(
            Path(file_path), file_name_of(file_path), blueprint_name, max_pages_to_process, **kwargs
        )

    def process_any_document_from_stream(
        self,
        file: BinaryIO | bytes | os.PathLike,
        file_name: str,
        blueprint_name: str,
        max_pages_to_process: int = 20,
        **kwargs,
    ):
        request_arguments = {
            "file_name": file_name,
            "file": file,
            "blueprint_name": blueprint_name,
            "max_pages_to_process": max_pages_to_process,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/any-documents/", request_arguments, has_files=True)

    def process_any_document_from_buffer(
        self,
        file_buffer: bytes,
        file_name: str,
        blueprint_name: str,
        max_pages_to_process: int = 20,
        **kwargs,
    ):
        return self.process_any_document_from_stream(
            bytes(file_buffer), file_name, blueprint_name, max_pages_to_process, **kwargs
        )

    def process_any_document_from_base64(
        self,
        file_base64_string: str,
        file_name: str,
        blueprint_name: str,
        max_pages_to_process: int = 20,
        **kwargs,
    ):
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
            "blueprint_name": blueprint_name,
            "max_pages_to_process": max_pages_to_process,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/any-documents/", request_arguments)

    def process_any_document_from_url(
        self,
        file_url: str,
        blueprint_name: str,
        max_pages_to_process: int = 20,
        **kwargs,
    ):
        request_arguments = {
            "file_url": file_url,
            "blueprint_name": blueprint_name,
            "max_pages_to_process": max_pages_to_process,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/any-documents/", request_arguments)

    def get_any_documents(self, page: int = 1, page_size: int = 50, **kwargs):
        request_arguments = {"page": page, "page_size": page_size}
        return self._request("GET", "/any-documents/", request_arguments, params=kwargs or None, envelope=LIST)

    def get_any_document(self, document_id: int | str, **kwargs):
        return self._request("GET", f"/any-documents/{document_id}/", {}, params=kwargs or None)

    def delete_any_document(self, document_id: int | str):
        return self._request("DELETE", f"/any-documents/{document_id}/", {"id": document_id}, envelope=RAW)
