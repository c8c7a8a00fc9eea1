"""Tests for the MIME type helpers."""

import base64

import pytest

from veryfi_sdk.files import add_mime_type, check_mime_type, get_mime_type

RAW = base64.b64encode(b"some file").decode()


class TestMimeTypes:
    @pytest.mark.parametrize(
        "file_name, mime_type",
        [
            ("receipt.png", "image/png"),
            ("receipt.JPG", "image/jpeg"),
            ("photo.jpeg", "image/jpeg"),
            ("/tmp/invoice.pdf", "application/pdf"),
            ("notes.txt", "application/octet-stream"),
            ("no_extension", "application/octet-stream"),
        ],
    )
    def test_get_mime_type(self, file_name, mime_type):
        assert get_mime_type(file_name) == mime_type

    def test_check_mime_type(self):
        assert check_mime_type(f"data:image/png;base64,{RAW}")
        assert check_mime_type(f"data:application/pdf;base64,{RAW}")
        assert not check_mime_type(f"data:image/gif;base64,{RAW}")
        assert not check_mime_type(RAW)


class TestAddMimeType:
    def test_adds_prefix_from_extension(self):
        assert add_mime_type(RAW, "invoice.pdf") == f"data:application/pdf;base64,{RAW}"

    def test_unknown_extension_falls_back_to_octet_stream(self):
        assert add_mime_type(RAW, "notes.txt") == f"data:application/octet-stream;base64,{RAW}"

    @pytest.mark.parametrize("file_name", ["receipt.png", "invoice.pdf", "notes.txt"])
    def test_idempotent(self, file_name):
        once = add_mime_type(RAW, file_name)
        assert add_mime_type(once, file_name) == once

    def test_existing_prefix_wins_over_file_name(self):
        """A caller supplied prefix is never replaced by the file name's type."""
        prefixed = f"data:image/png;base64,{RAW}"
        assert add_mime_type(prefixed, "invoice.pdf") == prefixed
