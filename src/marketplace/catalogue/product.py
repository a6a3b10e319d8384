"""Product aggregate root: a listing in the campus marketplace catalogue."""

from datetime import UTC, datetime

from protean.fields import DateTime, Integer, String

from marketplace.domain import marketplace


@marketplace.aggregate
class Product:
    """A product offered for pickup on one campus.

    Products are created at seed time and only ever read by this service;
    price edits happen directly in the store.
    """

    name: String(required=True, max_length=255)
    price: Integer(required=True, min_value=0)
    campus: String(required=True, max_length=50)
    category: String(required=True, max_length=100)
    image_url: String(max_length=500, default="")
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name, price, campus, category, image_url=""):
        return cls(
            name=name,
            price=price,
            campus=campus,
            category=category,
            image_url=image_url or "",
            created_at=datetime.now(UTC),
        )

    def to_dict(self):
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "campus": self.campus,
            "category": self.category,
            "image_url": self.image_url or "",
            "created_at": self.created_at,
        }
