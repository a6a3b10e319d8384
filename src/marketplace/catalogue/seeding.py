"""Catalogue seeding: idempotent starter data command and handler."""

import structlog
from protean import handle
from protean.utils.globals import current_domain

from marketplace.catalogue.product import Product
from marketplace.domain import marketplace

logger = structlog.get_logger(__name__)

STARTER_PRODUCTS = (
    {"name": "GE Book: Ethics", "price": 120, "campus": "ADMU", "category": "Books"},
    {"name": "A4 Bond Paper (500s)", "price": 180, "campus": "ADMU", "category": "School Supplies"},
    {"name": "Preloved Hoodie", "price": 130, "campus": "ADMU", "category": "Preloved"},
    {"name": "Wired Earphones", "price": 150, "campus": "UPD", "category": "Gadgets"},
)


@marketplace.command(part_of="Product")
class SeedCatalogue:
    """Insert the starter products unless the catalogue already has some."""


@marketplace.command_handler(part_of=Product)
class SeedCatalogueHandler:
    @handle(SeedCatalogue)
    def seed_catalogue(self, _command):
        repo = current_domain.repository_for(Product)

        existing = repo._dao.query.all().total
        if existing > 0:
            logger.info("Catalogue already seeded", count=existing)
            return {"ok": True, "count": existing}

        for data in STARTER_PRODUCTS:
            repo.add(Product.create(image_url="", **data))

        logger.info("Catalogue seeded", count=len(STARTER_PRODUCTS))
        return {"ok": True}
