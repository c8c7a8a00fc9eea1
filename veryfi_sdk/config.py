"""
Client configuration.

A ClientConfig is built once and never mutated; every request reads its
credentials and endpoint settings from it.
"""

import os
from dataclasses import dataclass, field

from veryfi_sdk.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.veryfi.com/"
DEFAULT_API_VERSION = "v8"
DEFAULT_TIMEOUT = 120  # Large PDFs can take a while to process

DEFAULT_CATEGORIES = (
    "Advertising & Marketing",
    "Automotive",
    "Bank Charges & Fees",
    "Legal & Professional Services",
    "Insurance",
    "Meals & Entertainment",
    "Office Supplies & Software",
    "Taxes & Licenses",
    "Travel",
    "Rent & Lease",
    "Repairs & Maintenance",
    "Payroll",
    "Utilities",
    "Job Supplies",
    "Grocery",
)

ENV_VARS = {
    "client_id": "VERYFI_CLIENT_ID",
    "client_secret": "VERYFI_CLIENT_SECRET",
    "username": "VERYFI_USERNAME",
    "api_key": "VERYFI_API_KEY",
    "base_url": "VERYFI_URL",
    "api_version": "VERYFI_API_VERSION",
    "timeout": "VERYFI_TIMEOUT",
}


@dataclass(frozen=True)
class ClientConfig:
    """
    Credentials and endpoint settings for one client.

    Args:
        client_id: Your Veryfi client id
        client_secret: Your Veryfi client secret. Requests are left unsigned when omitted.
        username: Your Veryfi username
        api_key: Your Veryfi API key
        base_url: API base URL (default: https://api.veryfi.com/)
        api_version: API version segment (default: v8)
        timeout: Request timeout in seconds (default: 120)
        categories: Categories sent with receipts and invoices when none are given
    """

    client_id: str
    client_secret: str | None
    username: str
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    categories: tuple[str, ...] = field(default=DEFAULT_CATEGORIES)

    def __post_init__(self):
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")
        object.__setattr__(self, "categories", tuple(self.categories))

    @property
    def api_url(self) -> str:
        """Base URL to the Veryfi API including the version segment."""
        return f"{self.base_url}api/{self.api_version}"

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "ClientConfig":
        """
        Build a config from VERYFI_* environment variables.

        Keyword arguments win over the environment.
        """
        environ = os.environ if environ is None else environ
        values: dict = {}
        for name, var in ENV_VARS.items():
            if environ.get(var):
                values[name] = environ[var]
        values.update({k: v for k, v in overrides.items() if v is not None})

        missing = [
            ENV_VARS[name]
            for name in ("client_id", "username", "api_key")
            if not values.get(name)
        ]
        if missing:
            raise ConfigurationError(f"Missing Veryfi credentials: {', '.join(missing)}")

        if "timeout" in values:
            try:
                values["timeout"] = float(values["timeout"])
            except ValueError as e:
                raise ConfigurationError(f"Invalid timeout: {values['timeout']!r}") from e

        values.setdefault("client_secret", None)
        return cls(**values)
