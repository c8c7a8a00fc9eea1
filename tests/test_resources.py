"""
Tests for the endpoint wrappers.

Each resource is checked for the endpoint it targets, the arguments it
sends and the envelope it removes from the response.
"""

import base64
import json

import httpx
import pytest
import respx

from veryfi_sdk import Client
from veryfi_sdk.config import DEFAULT_CATEGORIES
from veryfi_sdk.errors import ConfigurationError

API_URL = "https://api.veryfi.com/api/v8/partner"
API_HOST = "api.veryfi.com"

CLIENT_ARGS = {
    "client_id": "vrfTestClientId",
    "client_secret": None,
    "username": "test_user",
    "api_key": "test_api_key",
}

SAMPLE_RECEIPT = {
    "id": 31727276,
    "vendor": {"name": "Walgreens"},
    "total": 10.31,
}

SAMPLE_ANY_DOCUMENT = {
    "id": 4559568,
    "blueprint_name": "us_driver_license",
    "data": {"first_name": "JANE", "last_name": "DOE"},
}

PNG_BASE64 = base64.b64encode(b"\x89PNG fake").decode()


@pytest.fixture
def client():
    client = Client(**CLIENT_ARGS)
    yield client
    client.close()


@pytest.fixture
def receipt(tmp_path):
    path = tmp_path / "receipt.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake image data")
    return path


def sent_json(route) -> dict:
    return json.loads(route.calls[0].request.content)


class TestDocuments:
    """Test receipt and invoice operations."""

    @respx.mock
    def test_process_document_from_path(self, client, receipt):
        """Processing a file returns the extracted document."""
        route = respx.post(f"{API_URL}/documents/").mock(
            return_value=httpx.Response(201, json=SAMPLE_RECEIPT)
        )

        document = client.process_document(receipt)

        assert document["vendor"]["name"] == "Walgreens"
        assert document["total"] == 10.31
        request = route.calls[0].request
        assert request.headers["content-type"].startswith("multipart/form-data")

    def test_process_document_missing_file_raises(self, client):
        """A missing file fails before anything is sent."""
        with pytest.raises(FileNotFoundError):
            client.process_document("/nonexistent/receipt.png")

    @respx.mock
    def test_process_document_from_base64(self, client):
        """Base64 input is sent as file_data with a MIME prefix."""
        route = respx.post(f"{API_URL}/documents/").mock(
            return_value=httpx.Response(200, json={"data": SAMPLE_RECEIPT})
        )

        document = client.process_document_from_base64(PNG_BASE64, "receipt.png", auto_delete=True)

        assert document == SAMPLE_RECEIPT
        body = sent_json(route)
        assert body["file_name"] == "receipt.png"
        assert body["file_data"] == f"data:image/png;base64,{PNG_BASE64}"
        assert body["categories"] == list(DEFAULT_CATEGORIES)
        assert body["auto_delete"] is True

    @respx.mock
    def test_empty_categories_are_sent(self, client):
        """An explicit empty list is not replaced by the defaults."""
        route = respx.post(f"{API_URL}/documents/").mock(
            return_value=httpx.Response(200, json=SAMPLE_RECEIPT)
        )

        client.process_document_from_url("https://cdn.example.com/receipt.jpg", categories=[])

        assert sent_json(route)["categories"] == []

    @respx.mock
    def test_process_document_from_url_multiple_files(self, client):
        """file_urls is sent as a list."""
        route = respx.post(f"{API_URL}/documents/").mock(
            return_value=httpx.Response(200, json=SAMPLE_RECEIPT)
        )

        client.process_document_from_url(
            file_urls=["https://cdn.example.com/1.jpg", "https://cdn.example.com/2.jpg"],
            boost_mode=True,
            max_pages_to_process=3,
        )

        body = sent_json(route)
        assert body["file_url"] is None
        assert body["file_urls"] == ["https://cdn.example.com/1.jpg", "https://cdn.example.com/2.jpg"]
        assert body["boost_mode"] is True
        assert body["max_pages_to_process"] == 3

    @respx.mock
    def test_extra_fields_override_defaults(self, client):
        """Additional fields are merged last and win on collision."""
        route = respx.post(f"{API_URL}/documents/").mock(
            return_value=httpx.Response(200, json=SAMPLE_RECEIPT)
        )

        client.process_document_from_base64(
            PNG_BASE64, "receipt.png", file_data="data:image/png;base64,AAAA", tags=["trip"]
        )

        body = sent_json(route)
        assert body["file_data"] == "data:image/png;base64,AAAA"
        assert body["tags"] == ["trip"]

    @respx.mock
    def test_get_documents_pagination(self, client):
        """Page and page size are sent exactly as given."""
        route = respx.route(method="GET", host=API_HOST, path="/api/v8/partner/documents/").mock(
            return_value=httpx.Response(200, json={"documents": [SAMPLE_RECEIPT]})
        )

        documents = client.get_documents(page=2, page_size=10, created_date__gt="2024-01-01")

        assert documents == {"documents": [SAMPLE_RECEIPT]}
        body = sent_json(route)
        assert body["page"] == 2
        assert body["page_size"] == 10
        assert route.calls[0].request.url.params["created_date__gt"] == "2024-01-01"

    @respx.mock
    def test_update_document_accepts_nested_fields(self, client):
        """update_document sends nested values as given."""
        route = respx.put(f"{API_URL}/documents/1/").mock(
            return_value=httpx.Response(200, json={"data": {"id": 1}})
        )

        assert client.update_document(1, vendor={"name": "Starbucks"}, total=5) == {"id": 1}
        assert sent_json(route) == {"vendor": {"name": "Starbucks"}, "total": 5}

    @respx.mock
    def test_delete_document_returns_raw_response(self, client):
        """Delete returns the response as is."""
        route = respx.delete(f"{API_URL}/documents/1/").mock(
            return_value=httpx.Response(200, json={"status": "ok", "message": "Document has been deleted"})
        )

        assert client.delete_document(1) == {"status": "ok", "message": "Document has been deleted"}
        assert sent_json(route) == {"id": 1}


class TestTags:
    """Test document tag operations."""

    @respx.mock
    def test_add_tag(self, client):
        route = respx.put(f"{API_URL}/documents/1/tags/").mock(
            return_value=httpx.Response(200, json={"id": 7, "name": "travel"})
        )

        assert client.add_tag(1, "travel") == {"id": 7, "name": "travel"}
        assert sent_json(route) == {"name": "travel"}

    @respx.mock
    def test_add_tags(self, client):
        route = respx.post(f"{API_URL}/documents/1/tags/").mock(
            return_value=httpx.Response(200, json={"tags": [{"id": 7, "name": "a"}]})
        )

        client.add_tags(1, ("a", "b"))
        assert sent_json(route) == {"tags": ["a", "b"]}

    @respx.mock
    def test_replace_tags(self, client):
        route = respx.put(f"{API_URL}/documents/1/").mock(return_value=httpx.Response(200, json={"id": 1}))

        client.replace_tags(1, ["only"])
        assert sent_json(route) == {"tags": ["only"]}

    @respx.mock
    def test_delete_tags(self, client):
        route = respx.delete(f"{API_URL}/documents/1/tags/").mock(
            return_value=httpx.Response(200, json={"status": "ok"})
        )

        assert client.delete_tags(1) == {"status": "ok"}
        assert route.called


class TestAnyDocuments:
    """Test blueprint based document operations."""

    @respx.mock
    def test_data_field_of_document_is_unwrapped(self, client):
        """The data envelope is removed from any-document responses."""
        respx.get(f"{API_URL}/any-documents/4559568/").mock(
            return_value=httpx.Response(200, json={"data": SAMPLE_ANY_DOCUMENT})
        )

        assert client.get_any_document(4559568) == SAMPLE_ANY_DOCUMENT

    @respx.mock
    def test_process_from_url(self, client):
        route = respx.post(f"{API_URL}/any-documents/").mock(
            return_value=httpx.Response(200, json=SAMPLE_ANY_DOCUMENT)
        )

        client.process_any_document_from_url("https://cdn.example.com/license.png", "us_driver_license")

        assert sent_json(route) == {
            "file_url": "https://cdn.example.com/license.png",
            "blueprint_name": "us_driver_license",
            "max_pages_to_process": 20,
        }

    @respx.mock
    def test_process_from_buffer(self, client):
        route = respx.post(f"{API_URL}/any-documents/").mock(
            return_value=httpx.Response(200, json=SAMPLE_ANY_DOCUMENT)
        )

        client.process_any_document_from_buffer(b"license bytes", "license.png", "us_driver_license")

        content = route.calls[0].request.read()
        assert b"license bytes" in content
        assert b'name="blueprint_name"\r\n\r\nus_driver_license' in content

    @respx.mock
    def test_get_any_documents_results_envelope(self, client):
        """Legacy list responses are unwrapped from results."""
        respx.route(method="GET", host=API_HOST, path="/api/v8/partner/any-documents/").mock(
            return_value=httpx.Response(200, json={"results": [SAMPLE_ANY_DOCUMENT]})
        )

        assert client.get_any_documents() == [SAMPLE_ANY_DOCUMENT]


class TestBoundingBoxResources:
    """Bank statements, checks, W-8BEN-E and W-9 share the same shape."""

    @pytest.mark.parametrize(
        "method, endpoint",
        [
            ("process_bank_statement_from_url", "/bank-statements/"),
            ("process_check_from_url", "/checks/"),
            ("process_w8bene_from_url", "/w-8ben-e/"),
            ("process_w9_from_url", "/w9s/"),
        ],
    )
    @respx.mock
    def test_process_from_url(self, client, method, endpoint):
        route = respx.post(f"{API_URL}{endpoint}").mock(
            return_value=httpx.Response(200, json={"data": {"id": 1}})
        )

        result = getattr(client, method)("https://cdn.example.com/doc.pdf", bounding_boxes=True)

        assert result == {"id": 1}
        body = sent_json(route)
        assert body["file_url"] == "https://cdn.example.com/doc.pdf"
        assert body["bounding_boxes"] is True
        assert body["confidence_details"] is False

    @pytest.mark.parametrize(
        "method, endpoint",
        [
            ("process_bank_statement", "/bank-statements/"),
            ("process_check", "/checks/"),
            ("process_w8bene", "/w-8ben-e/"),
            ("process_w9", "/w9s/"),
        ],
    )
    @respx.mock
    def test_process_from_path(self, client, receipt, method, endpoint):
        route = respx.post(f"{API_URL}{endpoint}").mock(
            return_value=httpx.Response(200, json={"id": 1})
        )

        assert getattr(client, method)(receipt, confidence_details=True) == {"id": 1}
        assert route.calls[0].request.headers["content-type"].startswith("multipart/form-data")

    @pytest.mark.parametrize(
        "method, endpoint",
        [
            ("process_bank_statement_from_base64", "/bank-statements/"),
            ("process_check_from_base64", "/checks/"),
            ("process_w8bene_from_base64", "/w-8ben-e/"),
            ("process_w9_from_base64", "/w9s/"),
        ],
    )
    @respx.mock
    def test_process_from_base64(self, client, method, endpoint):
        route = respx.post(f"{API_URL}{endpoint}").mock(
            return_value=httpx.Response(200, json={"id": 1})
        )

        getattr(client, method)(PNG_BASE64, "statement.pdf")

        assert sent_json(route)["file_data"] == f"data:application/pdf;base64,{PNG_BASE64}"

    @pytest.mark.parametrize(
        "method, endpoint",
        [
            ("get_bank_statement", "/bank-statements/9/"),
            ("get_check", "/checks/9/"),
            ("get_w8bene", "/w-8ben-e/9/"),
        ],
    )
    @respx.mock
    def test_get_by_id(self, client, method, endpoint):
        route = respx.get(f"{API_URL}{endpoint}").mock(
            return_value=httpx.Response(200, json={"data": {"id": 9}})
        )

        assert getattr(client, method)(9, bounding_boxes=True) == {"id": 9}
        assert sent_json(route) == {"bounding_boxes": True, "confidence_details": False}

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get_bank_statements", "/api/v8/partner/bank-statements/"),
            ("get_checks", "/api/v8/partner/checks/"),
            ("get_w8benes", "/api/v8/partner/w-8ben-e/"),
            ("get_business_cards", "/api/v8/partner/business-cards/"),
        ],
    )
    @respx.mock
    def test_get_all(self, client, method, path):
        route = respx.route(method="GET", host=API_HOST, path=path).mock(
            return_value=httpx.Response(200, json={"data": [{"id": 1}]})
        )

        assert getattr(client, method)(page=3) == [{"id": 1}]
        assert sent_json(route)["page"] == 3

    @pytest.mark.parametrize(
        "method, endpoint",
        [
            ("delete_bank_statement", "/bank-statements/5/"),
            ("delete_check", "/checks/5/"),
            ("delete_w8bene", "/w-8ben-e/5/"),
            ("delete_w9", "/w9s/5/"),
            ("delete_business_card", "/business-cards/5/"),
            ("delete_any_document", "/any-documents/5/"),
        ],
    )
    @respx.mock
    def test_delete(self, client, method, endpoint):
        route = respx.delete(f"{API_URL}{endpoint}").mock(
            return_value=httpx.Response(200, json={"status": "ok"})
        )

        assert getattr(client, method)(5) == {"status": "ok"}
        assert sent_json(route) == {"id": 5}


class TestBusinessCards:
    @respx.mock
    def test_process_from_stream(self, client, receipt):
        """An open binary file is streamed as the file part."""
        route = respx.post(f"{API_URL}/business-cards/").mock(
            return_value=httpx.Response(200, json={"data": {"id": 3}})
        )

        with open(receipt, "rb") as f:
            assert client.process_business_card_from_stream(f, "card.png") == {"id": 3}

        assert route.calls[0].request.headers["content-type"].startswith("multipart/form-data")

    @respx.mock
    def test_process_from_url(self, client):
        route = respx.post(f"{API_URL}/business-cards/").mock(
            return_value=httpx.Response(200, json={"id": 3})
        )

        client.process_business_card_from_url("https://cdn.example.com/card.png", external_id="c-1")

        assert sent_json(route) == {"file_url": "https://cdn.example.com/card.png", "external_id": "c-1"}


class TestW2s:
    """Test W-2 operations and their API version check."""

    @respx.mock
    def test_get_w2s_unwraps_results(self, client):
        route = respx.route(method="GET", host=API_HOST, path="/api/v8/partner/w2s/").mock(
            return_value=httpx.Response(200, json={"data": {"results": [{"id": 1}], "count": 1}})
        )

        assert client.get_w2s(page=2) == [{"id": 1}]
        assert route.calls[0].request.url.params["page"] == "2"

    @respx.mock
    def test_process_w2_from_url(self, client):
        route = respx.post(f"{API_URL}/w2s/").mock(return_value=httpx.Response(200, json={"id": 1}))

        client.process_w2_from_url("https://cdn.example.com/w2.pdf", max_pages_to_process=2)

        body = sent_json(route)
        assert body["file_url"] == "https://cdn.example.com/w2.pdf"
        assert body["max_pages_to_process"] == 2
        assert body["auto_delete"] is False

    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.get_w2s(),
            lambda c: c.get_w2(1),
            lambda c: c.delete_w2(1),
            lambda c: c.process_w2("w2.pdf"),
            lambda c: c.process_w2_from_buffer(b"w2", "w2.pdf"),
            lambda c: c.process_w2_from_base64(PNG_BASE64, "w2.pdf"),
            lambda c: c.process_w2_from_url("https://cdn.example.com/w2.pdf"),
        ],
    )
    def test_requires_v8(self, call):
        """Any W-2 call on another API version fails without a request."""
        with Client(**CLIENT_ARGS, api_version="v7") as client:
            with pytest.raises(ConfigurationError, match="w2 is only supported on v8"):
                call(client)


class TestW9s:
    @respx.mock
    def test_get_w9s_without_page(self, client):
        route = respx.route(method="GET", host=API_HOST, path="/api/v8/partner/w9s/").mock(
            return_value=httpx.Response(200, json={"data": {"results": []}})
        )

        assert client.get_w9s() == []
        assert "page" not in route.calls[0].request.url.params

    @respx.mock
    def test_get_w9(self, client):
        respx.get(f"{API_URL}/w9s/4/").mock(return_value=httpx.Response(200, json={"data": {"id": 4}}))

        assert client.get_w9(4) == {"id": 4}


class TestSplitAndClassify:
    @respx.mock
    def test_split_document_from_url(self, client):
        route = respx.post(f"{API_URL}/documents-set/").mock(
            return_value=httpx.Response(200, json={"id": 11, "status": "in_progress"})
        )

        result = client.split_document_from_url("https://cdn.example.com/bundle.pdf")

        assert result["status"] == "in_progress"
        assert sent_json(route)["file_url"] == "https://cdn.example.com/bundle.pdf"

    @respx.mock
    def test_get_split_document(self, client):
        respx.get(f"{API_URL}/documents-set/11/").mock(
            return_value=httpx.Response(200, json={"id": 11, "documents": []})
        )

        assert client.get_split_document(11) == {"id": 11, "documents": []}

    @respx.mock
    def test_split_document_from_path(self, client, receipt):
        route = respx.post(f"{API_URL}/documents-set/").mock(
            return_value=httpx.Response(200, json={"id": 11})
        )

        client.split_document(receipt)

        assert route.calls[0].request.headers["content-type"].startswith("multipart/form-data")

    @respx.mock
    def test_classify_document_from_base64(self, client):
        route = respx.post(f"{API_URL}/classify/").mock(
            return_value=httpx.Response(200, json={"document_type": {"value": "receipt", "score": 0.98}})
        )

        result = client.classify_document_from_base64(PNG_BASE64, "receipt.png")

        assert result["document_type"]["value"] == "receipt"
        assert sent_json(route)["file_data"].startswith("data:image/png;base64,")

    @respx.mock
    def test_classify_document_from_buffer(self, client):
        route = respx.post(f"{API_URL}/classify/").mock(
            return_value=httpx.Response(200, json={"document_type": {"value": "check"}})
        )

        client.classify_document_from_buffer(b"check bytes", "check.jpg", document_types=["check", "receipt"])

        content = route.calls[0].request.read()
        assert b"check bytes" in content
        assert content.count(b'name="document_types"') == 2
