"""Tests for request signing."""

import base64
import hashlib
import hmac

from veryfi_sdk.signing import build_payload, encode_uri, generate_signature, get_timestamp

SECRET = "test_secret"
TIMESTAMP = 1700000000000
ARGUMENTS = {
    "file_name": "receipt.png",
    "auto_delete": True,
    "categories": ["Travel", "Meals & Entertainment"],
}


class TestPayload:
    def test_payload_string(self):
        """Arguments follow the timestamp in insertion order."""
        assert build_payload({"a": 1, "b": "two"}, 42) == "timestamp:42,a:1,b:two"

    def test_empty_arguments(self):
        assert build_payload({}, 42) == "timestamp:42"

    def test_insertion_order_matters(self):
        assert build_payload({"a": 1, "b": 2}, 42) != build_payload({"b": 2, "a": 1}, 42)

    def test_encode_uri_keeps_reserved_characters(self):
        """Separators survive, spaces and non-ASCII are percent-encoded."""
        assert encode_uri("timestamp:1,a:b/c?d=e&f") == "timestamp:1,a:b/c?d=e&f"
        assert encode_uri("Meals & Entertainment") == "Meals%20&%20Entertainment"
        assert encode_uri("café") == "caf%C3%A9"


class TestSignature:
    def test_matches_hmac_sha256(self):
        """The signature is the base64 HMAC-SHA256 of the encoded payload."""
        arguments = {"file_url": "https://cdn.example.com/receipt.jpg"}
        payload = b"timestamp:1700000000000,file_url:https://cdn.example.com/receipt.jpg"
        expected = base64.b64encode(hmac.new(b"test_secret", payload, hashlib.sha256).digest()).decode()

        assert generate_signature(SECRET, arguments, TIMESTAMP) == expected

    def test_deterministic(self):
        """Same secret, timestamp and arguments always give the same signature."""
        signatures = {generate_signature(SECRET, dict(ARGUMENTS), TIMESTAMP) for _ in range(5)}
        assert len(signatures) == 1

    def test_sensitive_to_argument_values(self):
        base = generate_signature(SECRET, ARGUMENTS, TIMESTAMP)
        assert generate_signature(SECRET, {**ARGUMENTS, "auto_delete": False}, TIMESTAMP) != base
        assert generate_signature(SECRET, {**ARGUMENTS, "file_name": "receipt.jpg"}, TIMESTAMP) != base

    def test_sensitive_to_timestamp(self):
        assert generate_signature(SECRET, ARGUMENTS, TIMESTAMP) != generate_signature(
            SECRET, ARGUMENTS, TIMESTAMP + 1
        )

    def test_sensitive_to_secret(self):
        assert generate_signature(SECRET, ARGUMENTS, TIMESTAMP) != generate_signature(
            "other_secret", ARGUMENTS, TIMESTAMP
        )

    def test_signature_is_base64(self):
        signature = generate_signature(SECRET, ARGUMENTS, TIMESTAMP)
        assert len(base64.b64decode(signature)) == 32
        assert signature == signature.strip()


def test_timestamp_is_milliseconds():
    assert get_timestamp() > 1_600_000_000_000
