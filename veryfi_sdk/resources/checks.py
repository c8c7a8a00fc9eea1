"""Checks: the /checks/ endpoint."""

import os
from pathlib import Path
from typing import BinaryIO

from veryfi_sdk.files import add_mime_type
from veryfi_sdk.resources._base import LIST, RAW, ResourceMixin, file_name_of, merge_fields


class ChecksMixin(ResourceMixin):
    def process_check(
        self,
        file_path: str | os.PathLike,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        """
        Process a check from a file on disk.

        Args:
            file_path: Path on disk to a file to submit for data extraction
            bounding_boxes: Return bounding box and bounding region for each field
            confidence_details: Return score and ocr_score for each field
            **kwargs: Additional request parameters

        Returns:
            Data extracted from the check
        """
        return self.process_check_from_stream(
            Path(file_path), file_name_of(file_path), bounding_boxes, confidence_details, **kwargs
        )

    def process_check_from_stream(
        self,
        file: BinaryIO | bytes | os.PathLike,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        request_arguments = {
            "file_name": file_name,
            "file": file,
            "bounding_boxes": bounding_boxes,
            "confidence_details": confidence_details,
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/checks/", request_arguments, has_files=True)

    def process_check_from_buffer(
        self,
        file_buffer: bytes,
        file_name: str,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        **kwargs,
    ):
        return self.process_check_from_stream(
            bytes(file_buffer), file_name, bounding_boxes, confidence_details, **kwargs
        )

    def process_check_from_base64(
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
        return self._request("POST", "/checks/", request_arguments)

    def process_check_from_url(
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
        return self._request("POST", "/checks/", request_arguments)

    def get_checks(
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
        return self._request("GET", "/checks/", request_arguments, params=kwargs or None, envelope=LIST)

    def get_check(
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
        return self._request("GET", f"/checks/{document_id}/", request_arguments, params=kwargs or None)

    def delete_check(self, document_id: int | str):
        return self._request("DELETE", f"/checks/{document_id}/", {"id": document_id}, envelope=RAW)
