"""
Veryfi SDK response models.

Typed dicts that describe the most common fields of the API response
schemas. They are annotations only: responses are returned exactly as the
API sent them and nothing here is validated.
"""

from typing import Any, TypedDict, Union


class BoundingElement(TypedDict, total=False):
    """A field value returned with its geometry when bounding_boxes is requested."""

    value: Any
    score: float
    ocr_score: float
    bounding_box: list[float]
    bounding_region: list[float]


Field = Union[str, float, int, bool, BoundingElement, None]


class Vendor(TypedDict, total=False):
    address: Field
    category: Field
    email: Field
    fax_number: Field
    name: Field
    phone_number: Field
    raw_name: str | None
    vendor_logo: Field
    vendor_reg_number: Field
    vendor_type: str | None
    web: Field


class BillTo(TypedDict, total=False):
    address: Field
    name: Field
    parsed_address: dict | None
    vat_number: Field


class ShipTo(TypedDict, total=False):
    address: Field
    name: Field
    parsed_address: dict | None


class Payment(TypedDict, total=False):
    card_number: Field
    display_name: str | None
    terms: Field
    type: Field


class TaxLine(TypedDict, total=False):
    base: Field
    name: Field
    order: int | None
    rate: Field
    total: Field


class LineItem(TypedDict, total=False):
    id: int
    order: int
    date: Field
    description: Field
    discount: Field
    price: Field
    quantity: Field
    sku: Field
    tax: Field
    tax_rate: Field
    total: Field
    type: str | None
    unit_of_measure: Field


class Tag(TypedDict):
    id: int
    name: str


class Document(TypedDict, total=False):
    """Data extracted from a receipt or invoice."""

    id: int
    external_id: str | None
    created_date: str | None
    updated_date: str | None
    date: Field
    due_date: Field
    document_type: Field
    category: Field
    currency_code: Field
    invoice_number: Field
    bill_to: BillTo | None
    ship_to: ShipTo | None
    vendor: Vendor | None
    line_items: list[LineItem] | None
    tax_lines: list[TaxLine] | None
    payment: Payment | None
    subtotal: Field
    tax: Field
    tip: Field
    total: Field
    tags: list[Tag] | None
    img_url: str | None
    pdf_url: str | None
    ocr_text: str | None
    is_duplicate: bool | None
    meta: dict | None
