"""
Veryfi Python SDK client.

Client wraps httpx.Client, AsyncClient wraps httpx.AsyncClient. Both share
header building, request signing, body encoding, error mapping and
response unwrapping; only the I/O differs.

Usage:
    client = Client(client_id, client_secret, username, api_key)
    document = client.process_document("receipt.jpg")

    async with AsyncClient(client_id, client_secret, username, api_key) as client:
        document = await client.process_document("receipt.jpg")
"""

import json
import logging
import os
from collections.abc import Iterator, Sequence
from contextlib import ExitStack, contextmanager
from dataclasses import asdict

import httpx

from veryfi_sdk.config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_CATEGORIES,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from veryfi_sdk.errors import APIError, TransportError, VeryfiClientError
from veryfi_sdk.files import get_mime_type
from veryfi_sdk.resources import ResourcesMixin
from veryfi_sdk.resources._base import DATA
from veryfi_sdk.signing import generate_signature, get_timestamp

logger = logging.getLogger(__name__)

USER_AGENT = "Python Veryfi-Python/1.0.0"

# Request argument carrying the uploaded file in multipart requests
FILE_FIELD = "file"


def unwrap(body, envelope: Sequence[str]):
    """Peel envelope keys off a response body, in order, while present."""
    for key in envelope:
        if isinstance(body, dict) and key in body:
            body = body[key]
    return body


class BaseClient(ResourcesMixin):
    """
    Shared request machinery of Client and AsyncClient.

    Args:
        client_id: Your Veryfi client id
        client_secret: Your Veryfi client secret. Requests are sent unsigned when None.
        username: Your Veryfi username
        api_key: Your Veryfi API key
        base_url: API base URL (default: https://api.veryfi.com/)
        api_version: API version (default: v8)
        timeout: Request timeout in seconds (default: 120)
        categories: Default categories for receipts and invoices
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str | None,
        username: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        categories: Sequence[str] = DEFAULT_CATEGORIES,
    ):
        self.config = ClientConfig(
            client_id=client_id,
            client_secret=client_secret,
            username=username,
            api_key=api_key,
            base_url=base_url,
            api_version=api_version,
            timeout=timeout,
            categories=tuple(categories),
        )

    @classmethod
    def from_config(cls, config: ClientConfig):
        return cls(**asdict(config))

    @classmethod
    def from_env(cls, **overrides):
        """Build a client from VERYFI_* environment variables."""
        return cls.from_config(ClientConfig.from_env(**overrides))

    def _get_url(self, endpoint_name: str) -> str:
        return f"{self.config.api_url}/partner{endpoint_name}"

    def _get_headers(self, request_arguments: dict, has_files: bool = False) -> dict:
        """
        Prepare the headers needed for a request.

        Multipart requests get no Content-Type here; httpx writes it with the
        form boundary. The signature headers are only added when a client
        secret is configured.
        """
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            "Client-Id": self.config.client_id,
            "Authorization": f"apikey {self.config.username}:{self.config.api_key}",
        }
        if not has_files:
            headers["Content-Type"] = "application/json"

        if self.config.client_secret:
            timestamp = get_timestamp()
            headers["X-Veryfi-Request-Timestamp"] = str(timestamp)
            headers["X-Veryfi-Request-Signature"] = generate_signature(
                self.config.client_secret, request_arguments, timestamp
            )
        return headers

    @contextmanager
    def _build_request(
        self,
        http: httpx.Client | httpx.AsyncClient,
        http_verb: str,
        endpoint_name: str,
        request_arguments: dict | None,
        params: dict | None,
        has_files: bool,
    ) -> Iterator[httpx.Request]:
        """Build the httpx request, keeping any file opened for it open until the block exits."""
        request_arguments = dict(request_arguments or {})
        url = self._get_url(endpoint_name)

        with ExitStack() as stack:
            if has_files:
                # Sign exactly the form fields that go on the wire
                signed = {
                    k: v for k, v in request_arguments.items() if k != FILE_FIELD and v is not None
                }
                headers = self._get_headers(signed, has_files=True)
                data, files = _encode_multipart(request_arguments, stack)
                request = http.build_request(
                    http_verb, url, headers=headers, params=params, data=data, files=files
                )
            else:
                headers = self._get_headers(request_arguments)
                request = http.build_request(
                    http_verb, url, headers=headers, params=params, content=json.dumps(request_arguments)
                )
            logger.debug("%s %s", http_verb, request.url)
            yield request

    def _handle_response(self, response: httpx.Response, envelope: Sequence[str]):
        logger.debug("%s %s -> %s", response.request.method, response.request.url, response.status_code)
        if response.is_success:
            if not response.content:
                return {}
            try:
                body = response.json()
            except ValueError as e:
                logger.warning(
                    "Veryfi API returned a non-JSON body on %s %s", response.request.method, response.request.url
                )
                raise APIError(
                    f"{response.status_code} {response.text}",
                    status_code=response.status_code,
                    error=response.text,
                    response=response,
                ) from e
            return unwrap(body, envelope)

        error = VeryfiClientError.from_response(response)
        logger.warning("Veryfi API error on %s %s: %s", response.request.method, response.request.url, error)
        raise error


class Client(BaseClient):
    """
    Synchronous Veryfi API client.

    Args:
        client_id: Your Veryfi client id
        client_secret: Your Veryfi client secret. Requests are sent unsigned when None.
        username: Your Veryfi username
        api_key: Your Veryfi API key
        base_url: API base URL (default: https://api.veryfi.com/)
        api_version: API version (default: v8)
        timeout: Request timeout in seconds (default: 120)
        categories: Default categories for receipts and invoices
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._client = httpx.Client(timeout=self.config.timeout)

    def _request(
        self,
        http_verb: str,
        endpoint_name: str,
        request_arguments: dict | None = None,
        params: dict | None = None,
        has_files: bool = False,
        envelope: Sequence[str] = DATA,
    ):
        """Submit the HTTP request and return the unwrapped JSON body."""
        with self._build_request(
            self._client, http_verb, endpoint_name, request_arguments, params, has_files
        ) as request:
            try:
                response = self._client.send(request)
            except httpx.TimeoutException as e:
                logger.warning("Veryfi request timed out: %s %s", http_verb, request.url)
                raise TransportError(f"Request timed out: {e}") from e
            except httpx.TransportError as e:
                logger.warning("Veryfi connection failed: %s %s", http_verb, request.url)
                raise TransportError(f"Connection failed: {e}") from e
        return self._handle_response(response, envelope)

    def close(self):
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class AsyncClient(BaseClient):
    """
    Asynchronous Veryfi API client.

    Takes the same arguments as Client. Every operation returns an
    awaitable; argument and configuration errors are raised immediately,
    before anything is awaited.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._client = httpx.AsyncClient(timeout=self.config.timeout)

    async def _request(
        self,
        http_verb: str,
        endpoint_name: str,
        request_arguments: dict | None = None,
        params: dict | None = None,
        has_files: bool = False,
        envelope: Sequence[str] = DATA,
    ):
        """Submit the HTTP request and return the unwrapped JSON body."""
        with self._build_request(
            self._client, http_verb, endpoint_name, request_arguments, params, has_files
        ) as request:
            try:
                response = await self._client.send(request)
            except httpx.TimeoutException as e:
                logger.warning("Veryfi request timed out: %s %s", http_verb, request.url)
                raise TransportError(f"Request timed out: {e}") from e
            except httpx.TransportError as e:
                logger.warning("Veryfi connection failed: %s %s", http_verb, request.url)
                raise TransportError(f"Connection failed: {e}") from e
        return self._handle_response(response, envelope)

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()


def _encode_multipart(request_arguments: dict, stack: ExitStack) -> tuple[dict, dict]:
    """
    Split request arguments into multipart form fields and the file part.

    The file is passed through untouched (a path is opened on the given
    stack); every other value is stringified, lists become repeated fields
    and None values are left out.
    """
    data: dict = {}
    files: dict = {}
    for key, value in request_arguments.items():
        if key == FILE_FIELD:
            if isinstance(value, (str, os.PathLike)):
                value = stack.enter_context(open(value, "rb"))
            file_name = request_arguments.get("file_name") or "file"
            files[key] = (file_name, value, get_mime_type(file_name))
        elif value is None:
            continue
        elif isinstance(value, (list, tuple)):
            data[key] = [str(item) for item in value]
        else:
            data[key] = str(value)
    return data, files
