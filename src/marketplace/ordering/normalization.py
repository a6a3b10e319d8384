"""Checkout payload normalization.

Clients post carts in several shapes. They are resolved here, once, into a
single canonical :class:`CheckoutRequest` so the pricing rules never see raw
client JSON:

- a bare list of items: ``[{...}, {...}]``
- an object with an ``items`` list: ``{"items": [...], "campus": ..., "pickup": ...}``
- an object with a ``cart`` list: ``{"cart": [...]}``

Per-item defaults:

==================  ===================================  =======
field               source keys (first usable wins)      default
==================  ===================================  =======
``product_id``      ``productId``, ``id``, ``name``      ``""``
``quantity``        ``qty``, ``quantity``                ``1``
``price_snapshot``  ``price``                            ``0``
==================  ===================================  =======
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from marketplace.shared.numbers import to_number

DEFAULT_CAMPUS = "ADMU"
DEFAULT_PICKUP = "Gate 2.5"


class PayloadShape(Enum):
    BARE_LIST = "list"
    ITEMS = "items"
    CART = "cart"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class NormalizedItem:
    product_id: str = ""
    quantity: float = 1.0
    price_snapshot: float = 0.0


@dataclass(frozen=True)
class CheckoutRequest:
    campus: str
    pickup: str
    shape: PayloadShape
    items: list[NormalizedItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items


def detect_shape(payload) -> PayloadShape:
    if isinstance(payload, list):
        return PayloadShape.BARE_LIST
    if isinstance(payload, Mapping):
        if isinstance(payload.get("items"), list):
            return PayloadShape.ITEMS
        if isinstance(payload.get("cart"), list):
            return PayloadShape.CART
    return PayloadShape.UNRECOGNIZED


def _raw_items(payload, shape: PayloadShape) -> list:
    if shape is PayloadShape.BARE_LIST:
        return payload
    if shape is PayloadShape.ITEMS:
        return payload["items"]
    if shape is PayloadShape.CART:
        return payload["cart"]
    return []


def _first_present(raw: Mapping, *keys):
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def normalize_item(raw) -> NormalizedItem:
    if not isinstance(raw, Mapping):
        raw = {}

    product_id = raw.get("productId") or raw.get("id") or raw.get("name") or ""

    return NormalizedItem(
        product_id=str(product_id).strip(),
        quantity=to_number(_first_present(raw, "qty", "quantity"), 1.0),
        price_snapshot=to_number(raw.get("price"), 0.0),
    )


def normalize_payload(payload, default_campus=DEFAULT_CAMPUS, default_pickup=DEFAULT_PICKUP) -> CheckoutRequest:
    shape = detect_shape(payload)
    options = payload if isinstance(payload, Mapping) else {}

    return CheckoutRequest(
        campus=str(options.get("campus") or default_campus),
        pickup=str(options.get("pickup") or default_pickup),
        shape=shape,
        items=[normalize_item(raw) for raw in _raw_items(payload, shape)],
    )
