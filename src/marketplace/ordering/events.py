"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out and persisted as an order."""

    order_id: Identifier(required=True)
    campus: String(required=True)
    pickup: String(required=True)
    total: Integer(required=True)
    item_count: Integer(required=True)
    placed_at: DateTime(required=True)
