"""Application tests for catalogue seeding via domain.process()."""

from marketplace.catalogue.product import Product
from marketplace.catalogue.seeding import STARTER_PRODUCTS, SeedCatalogue
from protean import current_domain


def _seed():
    return current_domain.process(SeedCatalogue(), asynchronous=False)


def _product_count():
    return current_domain.repository_for(Product)._dao.query.all().total


class TestSeedCatalogue:
    def test_first_seed_inserts_starter_products(self):
        result = _seed()

        assert result == {"ok": True}
        assert _product_count() == len(STARTER_PRODUCTS) == 4

    def test_seeding_twice_does_not_duplicate(self):
        _seed()
        result = _seed()

        assert result == {"ok": True, "count": 4}
        assert _product_count() == 4

    def test_existing_catalogue_is_left_alone(self):
        current_domain.repository_for(Product).add(
            Product.create(name="Scientific Calculator", price=450, campus="UST", category="Gadgets")
        )

        result = _seed()

        assert result == {"ok": True, "count": 1}
        assert _product_count() == 1

    def test_starter_products_are_persisted_with_their_prices(self):
        _seed()

        products = current_domain.repository_for(Product)._dao.query.all().items
        by_name = {p.name: p for p in products}

        assert by_name["GE Book: Ethics"].price == 120
        assert by_name["A4 Bond Paper (500s)"].category == "School Supplies"
        assert by_name["Wired Earphones"].campus == "UPD"
        assert all(p.to_dict()["image_url"] == "" for p in products)
