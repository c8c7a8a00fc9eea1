"""US tax forms: W-2 (/w2s/), W-8BEN-E (/w-8ben-e/) and W-9 (/w9s/)."""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from veryfi_sdk.files import add_mime_type
from veryfi_sdk.resources._base import LIST, RAW, ResourceMixin, file_name_of, merge_fields


class W2sMixin(ResourceMixin):
    """W-2 operations. Every call checks the API version before touching the network."""

    def process_w2(
        self,
        file_path: str | os.PathLike,
        auto_delete: bool = False,
        max_pages_to_process: int = 1,
        **kwargs,
    ):
        """
        Process a W-2 from a file on disk.

        Args:
            file_path: Path on disk to a file to submit for data extraction
            auto_delete: Delete this document from Veryfi after data has been extracted
            max_pages_to_process: How many pages to read, starting from page 1
            **kwargs: Additional request parameters

        Returns:
            Data extracted from the W-2

        Raises:
            ConfigurationError: If the client is not configured for API v8
        """
        self._check_w2_version()
        return self.process_w2_from_stream(
            Path(file_path), file_name_of(file_path), auto_delete, max_pages_to_process, **kwargs
        )

    def process_w2_from_stream(
        self,
        file: BinaryIO | bytes | os.PathLike,
        file_name: str,
        auto_delete: bool = False,
        max_pages_to_process: int = 1,
        **kwargs,
    ):
        self._check_w2_version()
        request_arguments = {
            "file": file,
            "file_name": file_name,
            "auto_delete": auto_delete,
            "max_pages_to_process": max_pages_to_process,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w2s/", request_arguments, has_files=True)

    def process_w2_from_buffer(
        self,
        file_buffer: bytes,
        file_name: str,
        auto_delete: bool = False,
        max_pages_to_process: int = 1,
        **kwargs,
    ):
        return self.process_w2_from_stream(
            bytes(file_buffer), file_name, auto_delete, max_pages_to_process, **kwargs
        )

    def process_w2_from_base64(
        self,
        file_base64_string: str,
        file_name: str,
        auto_delete: bool = False,
        max_pages_to_process: int = 1,
        **kwargs,
    ):
        self._check_w2_version()
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
            "auto_delete": auto_delete,
            "max_pages_to_process": max_pages_to_process,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w2s/", request_arguments)

    def process_w2_from_url(
        self,
        file_url: str | None = None,
        file_urls: Sequence[str] | None = None,
        auto_delete: bool = False,
        max_pages_to_process: int = 1,
        file_name: str | None = None,
        **kwargs,
    ):
        self._check_w2_version()
        request_arguments = {
            "file_name": file_name,
            "auto_delete": auto_delete,
            "file_url": file_url,
            "file_urls": list(file_urls) if file_urls is not None else None,
            "max_pages_to_process": max_pages_to_process,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w2s/", request_arguments)

    def get_w2s(self, page: int | None = None):
        """List W-2s. The page number is sent as a query parameter."""
        self._check_w2_version()
        params = {"page": page} if page is not None else None
        return self._request("GET", "/w2s/", {}, params=params, envelope=LIST)

    def get_w2(self, document_id: int | str):
        self._check_w2_version()
        return self._request("GET", f"/w2s/{document_id}/", {"id": document_id})

    def delete_w2(self, document_id: int | str):
        self._check_w2_version()
        return self._request("DELETE", f"/w2s/{document_id}/", {"id": document_id}, envelope=RAW)


class W8BENEsMixin(ResourceMixin):
    def process_w8bene(
        self,
        file_path: str | os.PathLike,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        """Process a W-8BEN-E from a file on disk."""
        return self.process_w8bene_from_stream(
            Path(file_path), file_name_of(file_path), bounding_boxes, confidence_details, **kwargs
        )

    def process_w8bene_from_stream(
        self,
        file: BinaryIO | bytes | os.PathLike,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "file": file,
            "file_name": file_name,
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w-8ben-e/", request_arguments, has_files=True)

    def process_w8bene_from_buffer(
        self,
        file_buffer: bytes,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        return self.process_w8bene_from_stream(
            bytes(file_buffer), file_name, bounding_boxes, confidence_details, **kwargs
        )

    def process_w8bene_from_base64(
        self,
        file_base64_string: str,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w-8ben-e/", request_arguments)

    def process_w8bene_from_url(
        self,
        file_url: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "file_url": file_url,
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w-8ben-e/", request_arguments)

    def get_w8benes(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "page": page,
            "page_size": page_size,
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        return self._request("GET", "/w-8ben-e/", request_arguments, params=kwargs or None, envelope=LIST)

    def get_w8bene(
        self,
        document_id: int | str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        return self._request("GET", f"/w-8ben-e/{document_id}/", request_arguments, params=kwargs or None)

    def delete_w8bene(self, document_id: int | str):
        return self._request("DELETE", f"/w-8ben-e/{document_id}/", {"id": document_id}, envelope=RAW)


class W9sMixin(ResourceMixin):
    def process_w9(
        self,
        file_path: str | os.PathLike,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        """Process a W-9 from a file on disk."""
        return self.process_w9_from_stream(
            Path(file_path), file_name_of(file_path), bounding_boxes, confidence_details, **kwargs
        )

    def process_w9_from_stream(
        self,
        file: BinaryIO | bytes | os.PathLike,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "file": file,
            "file_name": file_name,
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w9s/", request_arguments, has_files=True)

    def process_w9_from_buffer(
        self,
        file_buffer: bytes,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        return self.process_w9_from_stream(
            bytes(file_buffer), file_name, bounding_boxes, confidence_details, **kwargs
        )

    def process_w9_from_base64(
        self,
        file_base64_string: str,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w9s/", request_arguments)

    def process_w9_from_url(
        self,
        file_url: str | None = None,
        file_urls: Sequence[str] | None = None,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "file_url": file_url,
            "file_urls": list(file_urls) if file_urls is not None else None,
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/w9s/", request_arguments)

    def get_w9s(self, page: int | None = None):
        params = {"page": page} if page is not None else None
        return self._request("GET", "/w9s/", {}, params=params, envelope=LIST)

    def get_w9(self, document_id: int | str):
        return self._request("GET", f"/w9s/{document_id}/", {"id": document_id})

    def delete_w9(self, document_id: int | str):
        return self._request("DELETE", f"/w9s/{document_id}/", {"id": document_id}, envelope=RAW)
