"""Receipts and invoices: the /documents/ endpoint and its tags."""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from veryfi_sdk.files import add_mime_type
from veryfi_sdk.resources._base import DATA, LIST, RAW, ResourceMixin, file_name_of, merge_fields


class DocumentsMixin(ResourceMixin):
    def _categories(self, categories: Sequence[str] | None) -> list[str]:
        if categories is None:
            categories = self.config.categories
        return list(categories)

    def process_document(
        self,
        file_path: str | os.PathLike,
        categories: Sequence[str] | None = None,
        auto_delete: bool = False,
        **kwargs,
    ):
        """
        Process a receipt or invoice from a file on disk.

        The file is streamed as multipart form data, it is never loaded
        into memory as a whole.

        Args:
            file_path: Path on disk to a file to submit for data extraction
            categories: Categories Veryfi can use to categorize the document
                (default: the configured categories)
            auto_delete: Delete this document from Veryfi after data has been extracted
            **kwargs: Additional request parameters

        Returns:
            Data extracted from the document
        """
        return self.process_document_from_stream(
            Path(file_path),
            file_name_of(file_path),
            categories=categories,
            auto_delete=auto_delete,
            **kwargs,
        )

    def process_document_from_stream(
        self,
        file: BinaryIO | bytes | os.PathLike,
        file_name: str,
        categories: Sequence[str] | None = None,
        auto_delete: bool = False,
        **kwargs,
    ):
        """
        Process a receipt or invoice from a binary stream.

        Args:
            file: Binary file object, raw bytes, or a path opened for the duration of the call
            file_name: The file name including the extension
            categories: Categories Veryfi can use to categorize the document
            auto_delete: Delete this document from Veryfi after data has been extracted
            **kwargs: Additional request parameters

        Returns:
            Data extracted from the document
        """
        request_arguments = {
            "file_name": file_name,
            "file": file,
            "categories": self._categories(categories),
            "auto_delete": auto_delete,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/documents/", request_arguments, has_files=True)

    def process_document_from_buffer(
        self,
        file_buffer: bytes,
        file_name: str,
        categories: Sequence[str] | None = None,
        auto_delete: bool = False,
        **kwargs,
    ):
        """Process a receipt or invoice held in memory."""
        return self.process_document_from_stream(
            bytes(file_buffer),
            file_name,
            categories=categories,
            auto_delete=auto_delete,
            **kwargs,
        )

    def process_document_from_base64(
        self,
        file_base64_string: str,
        file_name: str,
        categories: Sequence[str] | None = None,
        auto_delete: bool = False,
        **kwargs,
    ):
        """
        Process a receipt or invoice from a base64 encoded string.

        A data: MIME prefix derived from file_name is added when the string
        has none.

        Args:
            file_base64_string: Base64 encoded file contents
            file_name: The file name including the extension
            categories: Categories Veryfi can use to categorize the document
            auto_delete: Delete this document from Veryfi after data has been extracted
            **kwargs: Additional request parameters

        Returns:
            Data extracted from the document
        """
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
            "categories": self._categories(categories),
            "auto_delete": auto_delete,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/documents/", request_arguments)

    def process_document_from_url(
        self,
        file_url: str | None = None,
        file_urls: Sequence[str] | None = None,
        categories: Sequence[str] | None = None,
        auto_delete: bool = False,
        boost_mode: bool = False,
        external_id: str | None = None,
        max_pages_to_process: int = 1,
        **kwargs,
    ):
        """
        Process a receipt or invoice from a publicly accessible URL.

        Args:
            file_url: Required if file_urls isn't specified, e.g. "https://cdn.example.com/receipt.jpg"
            file_urls: Required if file_url isn't specified. List of publicly accessible URLs
            categories: Categories to use when categorizing the document
            auto_delete: Delete this document from Veryfi after data has been extracted
            boost_mode: Skip data enrichment steps to process the document faster
            external_id: Optional custom document identifier
            max_pages_to_process: How many pages of a long document to read, starting from page 1
            **kwargs: Additional request parameters

        Returns:
            Data extracted from the document
        """
        request_arguments = {
            "auto_delete": auto_delete,
            "boost_mode": boost_mode,
            "categories": self._categories(categories),
            "external_id": external_id,
            "file_url": file_url,
            "file_urls": list(file_urls) if file_urls is not None else None,
            "max_pages_to_process": max_pages_to_process,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/documents/", request_arguments)

    def get_documents(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        """
        List processed documents.

        Args:
            page: Page number, starting at 1
            page_size: Documents per page
            bounding_boxes: Include bounding box metadata for each field
            confidence_details: Include confidence scores for each field
            **kwargs: Extra query parameters, e.g. created_date__gt

        Returns:
            The documents, unwrapped from the response envelope when there is one
        """
        request_arguments = {
            "page": page,
            "page_size": page_size,
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        return self._request("GET", "/documents/", request_arguments, params=kwargs or None, envelope=LIST)

    def get_document(self, document_id: int | str, **kwargs):
        """Retrieve a document by id. kwargs are sent as query parameters."""
        return self._request(
            "GET", f"/documents/{document_id}/", {"id": document_id}, params=kwargs or None
        )

    def update_document(self, document_id: int | str, **kwargs):
        """
        Update fields of a processed document.

        Nested values are accepted, e.g. vendor={"name": "..."}.
        """
        request_arguments = merge_fields({}, kwargs, allow_nested=True)
        return self._request("PUT", f"/documents/{document_id}/", request_arguments)

    def delete_document(self, document_id: int | str):
        return self._request("DELETE", f"/documents/{document_id}/", {"id": document_id}, envelope=RAW)

    # Tags

    def add_tag(self, document_id: int | str, tag: str):
        """Add a single tag to a document."""
        return self._request("PUT", f"/documents/{document_id}/tags/", {"name": tag})

    def add_tags(self, document_id: int | str, tags: Sequence[str]):
        """Add several tags to a document, keeping the existing ones."""
        return self._request("POST", f"/documents/{document_id}/tags/", {"tags": list(tags)})

    def replace_tags(self, document_id: int | str, tags: Sequence[str]):
        """Replace all tags on a document."""
        return self._request("PUT", f"/documents/{document_id}/", {"tags": list(tags)})

    def delete_tags(self, document_id: int | str):
        """Remove all tags from a document."""
        return self._request("DELETE", f"/documents/{document_id}/tags/", {}, envelope=RAW)
