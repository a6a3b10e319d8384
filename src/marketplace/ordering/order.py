"""Order aggregate with its OrderItem entities.

An order is created exactly once per checkout and never changes afterwards.
Each item records the unit price that was actually charged, which may come
from the catalogue or from the client's price snapshot.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from marketplace.domain import marketplace
from marketplace.ordering.events import OrderPlaced
from marketplace.ordering.pricing import order_total

# Stored in place of a product id when the client sent none
CLIENT_ID_PLACEHOLDER = "CLIENT-ID"


@marketplace.entity(part_of="Order")
class OrderItem:
    product_id: String(required=True, max_length=255)
    quantity: Integer(required=True, min_value=1)
    price: Float(required=True)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self):
        return {"product_id": self.product_id, "quantity": self.quantity, "price": self.price}


@marketplace.aggregate
class Order:
    campus: String(required=True, max_length=50)
    pickup: String(required=True, max_length=100)
    total: Integer(required=True, min_value=0)
    items: HasMany(OrderItem)
    created_at: DateTime()

    @invariant.post
    def total_must_match_items(self):
        expected = order_total(item.line_total for item in self.items)
        if self.total != expected:
            raise ValidationError({"total": [f"Order total {self.total} does not match item total {expected}"]})

    @classmethod
    def place(cls, campus, pickup, lines):
        """Create an order from priced checkout lines and raise ``OrderPlaced``."""
        now = datetime.now(UTC)
        items = [
            OrderItem(
                product_id=line.product_id or CLIENT_ID_PLACEHOLDER,
                quantity=line.quantity,
                price=line.unit_price,
            )
            for line in lines
        ]

        order = cls(
            campus=campus,
            pickup=pickup,
            total=order_total(line.line_total for line in lines),
            items=items,
            created_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                campus=campus,
                pickup=pickup,
                total=order.total,
                item_count=len(items),
                placed_at=now,
            )
        )
        return order

    def to_dict(self):
        return {
            "id": str(self.id),
            "campus": self.campus,
            "pickup": self.pickup,
            "total": self.total,
            "created_at": self.created_at,
            "items": [item.to_dict() for item in self.items],
        }
