"""Cart checkout: command and handler.

Prices are read from the catalogue, reconciled with the client's snapshots and
written as one order in a single unit of work. There is no locking: a price
edit racing a checkout may or may not be seen, as the store's default
isolation allows.
"""

import json

import structlog
from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.listing import find_prices
from marketplace.domain import marketplace
from marketplace.ordering.normalization import NormalizedItem
from marketplace.ordering.order import Order
from marketplace.ordering.pricing import resolve_lines

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class PlaceOrder:
    campus: String(required=True, max_length=50)
    pickup: String(required=True, max_length=100)
    items: Text(required=True)  # JSON: list of normalized item dicts


def place_order_command(request) -> PlaceOrder:
    """Build a PlaceOrder command from a normalized CheckoutRequest."""
    return PlaceOrder(
        campus=request.campus,
        pickup=request.pickup,
        items=json.dumps(
            [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "price_snapshot": item.price_snapshot,
                }
                for item in request.items
            ]
        ),
    )


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items = [NormalizedItem(**data) for data in json.loads(command.items)]

        catalogue_prices = find_prices(item.product_id for item in items)
        lines = resolve_lines(items, catalogue_prices)

        order = Order.place(campus=command.campus, pickup=command.pickup, lines=lines)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            total=order.total,
            item_count=len(lines),
            catalogue_hits=len(catalogue_prices),
        )
        return str(order.id)
