"""Tests for the Product aggregate."""

import pytest
from marketplace.catalogue.product import Product
from protean.exceptions import ValidationError


class TestProductCreation:
    def test_create_product(self):
        product = Product.create(name="GE Book: Ethics", price=120, campus="ADMU", category="Books")

        assert product.id is not None
        assert product.name == "GE Book: Ethics"
        assert product.price == 120
        assert product.to_dict()["image_url"] == ""
        assert product.created_at is not None

    def test_image_url_defaults_to_empty(self):
        product = Product.create(name="Hoodie", price=130, campus="ADMU", category="Preloved", image_url=None)
        assert product.to_dict()["image_url"] == ""

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(name="Broken", price=-1, campus="ADMU", category="Books")

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Product(price=10, campus="ADMU", category="Books")


class TestProductSerialization:
    def test_to_dict(self):
        product = Product.create(
            name="Wired Earphones",
            price=150,
            campus="UPD",
            category="Gadgets",
            image_url="https://cdn.example.com/earphones.jpg",
        )
        data = product.to_dict()

        assert data["id"] == str(product.id)
        assert data["price"] == 150
        assert data["campus"] == "UPD"
        assert data["image_url"] == "https://cdn.example.com/earphones.jpg"
