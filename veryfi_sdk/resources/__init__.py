"""Endpoint wrappers, one mixin per API resource."""

from veryfi_sdk.resources.any_documents import AnyDocumentsMixin
from veryfi_sdk.resources.bank_statements import BankStatementsMixin
from veryfi_sdk.resources.business_cards import BusinessCardsMixin
from veryfi_sdk.resources.checks import ChecksMixin
from veryfi_sdk.resources.documents import DocumentsMixin
from veryfi_sdk.resources.split import ClassifyMixin, SplitMixin
from veryfi_sdk.resources.tax_forms import W2sMixin, W8BENEsMixin, W9sMixin


class ResourcesMixin(
    DocumentsMixin,
    AnyDocumentsMixin,
    BankStatementsMixin,
    BusinessCardsMixin,
    ChecksMixin,
    W2sMixin,
    W8BENEsMixin,
    W9sMixin,
    SplitMixin,
    ClassifyMixin,
):
    """Every endpoint wrapper of the API."""


__all__ = [
    "ResourcesMixin",
    "DocumentsMixin",
    "AnyDocumentsMixin",
    "BankStatementsMixin",
    "BusinessCardsMixin",
    "ChecksMixin",
    "W2sMixin",
    "W8BENEsMixin",
    "W9sMixin",
    "SplitMixin",
    "ClassifyMixin",
]
