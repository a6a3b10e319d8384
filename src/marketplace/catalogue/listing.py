"""Catalogue listing query with optional campus, category and price filters."""

from protean.utils.globals import current_domain

from marketplace.catalogue.product import Product
from marketplace.shared.numbers import is_finite, to_number

DEFAULT_LIMIT = 60


def build_filters(campus=None, category=None, price_min=None, price_max=None) -> dict:
    """Translate query-string values into repository lookups.

    Empty strings are treated as absent, and so are price bounds that do not
    parse as finite numbers. Bounds are inclusive.
    """
    filters = {}
    if campus:
        filters["campus"] = campus
    if category:
        filters["category"] = category

    lower = to_number(price_min, None)
    upper = to_number(price_max, None)
    if is_finite(lower):
        filters["price__gte"] = lower
    if is_finite(upper):
        filters["price__lte"] = upper

    return filters


def list_products(campus=None, category=None, price_min=None, price_max=None, limit=DEFAULT_LIMIT) -> list[Product]:
    filters = build_filters(campus=campus, category=category, price_min=price_min, price_max=price_max)

    query = current_domain.repository_for(Product)._dao.query
    if filters:
        query = query.filter(**filters)
    return query.limit(limit).all().items


def find_prices(product_ids) -> dict[str, float]:
    """Current catalogue price for each of ``product_ids`` found in the store."""
    ids = sorted({pid for pid in product_ids if pid})
    if not ids:
        return {}

    found = current_domain.repository_for(Product)._dao.query.filter(id__in=ids).all().items
    return {str(product.id): product.price for product in found}
