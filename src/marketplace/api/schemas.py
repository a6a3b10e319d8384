"""Pydantic response schemas for the marketplace API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductResponse(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "0b6f6a52-6f0e-4f55-9a57-2f3f7c0f4d1e",
                    "name": "GE Book: Ethics",
                    "price": 120,
                    "campus": "ADMU",
                    "category": "Books",
                    "imageUrl": "",
                }
            ]
        },
    )

    id: str
    name: str
    price: int
    campus: str
    category: str
    image_url: str = Field("", serialization_alias="imageUrl")
    created_at: datetime | None = Field(None, serialization_alias="createdAt")


class SeedResponse(BaseModel):
    model_config = ConfigDict(json_schema_extra={"examples": [{"ok": True, "count": 4}]})

    ok: bool = True
    count: int | None = None


class EstimateResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"meters": 420.5, "minutes": 6, "fee": 13}, {"meters": 500, "minutes": 10, "fee": 20, "note": "fallback"}]}
    )

    meters: float
    minutes: int
    fee: int
    note: str | None = None


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"orderId": "d2d4a1b0-3c1e-4a57-8f0a-6b1c2e3f4a5b"}]},
    )

    order_id: str = Field(serialization_alias="orderId")


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(serialization_alias="productId")
    quantity: int
    price: float


class OrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    campus: str
    pickup: str
    total: int
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    items: list[OrderItemResponse] = []


class PickupPointResponse(BaseModel):
    label: str
    campus: str
    coordinates: list[float]


class ErrorResponse(BaseModel):
    error: str
