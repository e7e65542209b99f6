"""Catalogue management: commands and handler."""

import structlog
from protean import handle
from protean.fields import Date, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    """Add a product to the catalogue. Weight is in kilograms."""

    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    quantity: Integer(required=True, min_value=0)
    expires_on: Date()
    weight: Float(min_value=0.0)


@storefront.command(part_of="Product")
class RestockProduct:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)


@storefront.command_handler(part_of=Product)
class ManageCatalogueHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            quantity=command.quantity,
            expires_on=command.expires_on,
            weight=command.weight,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product added", product_id=str(product.id), kind=product.kind.value)
        return str(product.id)

    @handle(RestockProduct)
    def restock_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.restock(command.quantity)
        repo.add(product)
