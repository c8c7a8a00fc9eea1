"""Business cards: the /business-cards/ endpoint."""

import os
from pathlib import Path
from typing import BinaryIO

from veryfi_sdk.files import add_mime_type
from veryfi_sdk.resources._base import LIST, RAW, ResourceMixin, file_name_of, merge_fields


class BusinessCardsMixin(ResourceMixin):
    def process_business_card(self, file_path: str | os.PathLike, **kwargs):
        """Process a business card from a file on disk."""
        return self.process_business_card_from_stream(Path(file_path), file_name_of(file_path), **kwargs)

    def process_business_card_from_stream(
        self,
        file: BinaryIO | bytes | os.PathLike,
        file_name: str,
        **kwargs,
    ):
        request_arguments = {"file": file, "file_name": file_name}
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/business-cards/", request_arguments, has_files=True)

    def process_business_card_from_buffer(self, file_buffer: bytes, file_name: str, **kwargs):
        return self.process_business_card_from_stream(bytes(file_buffer), file_name, **kwargs)

    def process_business_card_from_base64(self, file_base64_string: str, file_name: str, **kwargs):
        request_arguments = {
            "file_name": file_name,
            "file_data": add_mime_type(file_base64_string, file_name),
        }
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/business-cards/", request_arguments)

    def process_business_card_from_url(self, file_url: str, **kwargs):
        request_arguments = {"file_url": file_url}
        merge_fields(request_arguments, kwargs)
        return self._request("POST", "/business-cards/", request_arguments)

    def get_business_cards(
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
        return self._request(
            "GET", "/business-cards/", request_arguments, params=kwargs or None, envelope=LIST
        )

    def get_business_card(
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
        return self._request(
            "GET", f"/business-cards/{document_id}/", request_arguments, params=kwargs or None
        )

    def delete_business_card(self, document_id: int | str):
        return self._request("DELETE", f"/business-cards/{document_id}/", {"id": document_id}, envelope=RAW)
