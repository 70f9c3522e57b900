"""Pure conversions between commands, entities and read views."""

from decimal import ROUND_HALF_UP, Decimal

from src.catalog.core.models.catalog import (
    CategoryCommand,
    CategoryStatus,
    CategoryView,
    ProductCommand,
    ProductView,
    StockStatus,
)
from src.catalog.entities.service.category import Category
from src.catalog.entities.service.product import Product
from src.catalog.runtime.config.config_data import CatalogConfig


def category_from_command(command: CategoryCommand) -> Category:
    return Category(name=command.name, description=command.description)


def apply_category_command(category: Category, command: CategoryCommand) -> Category:
    """Overwrite the mutable fields; id and deleted flag are kept."""
    return category.model_copy(
        update={"name": command.name, "description": command.description}
    )


def product_from_command(command: ProductCommand) -> Product:
    return Product(
        name=command.name,
        description=command.description,
        price=command.price,
        stock=command.stock,
        category_id=command.category_id,
    )


def apply_product_command(product: Product, command: ProductCommand) -> Product:
    """Overwrite every mutable field, including the category reference."""
    return product.model_copy(
        update={
            "name": command.name,
            "description": command.description,
            "price": command.price,
            "stock": command.stock,
            "category_id": command.category_id,
        }
    )


def stock_status(stock: int, config: CatalogConfig) -> StockStatus:
    if stock <= 0:
        return StockStatus.NO_STOCK
    if stock <= config.low_stock_threshold:
        return StockStatus.LOW
    if stock <= config.medium_stock_threshold:
        return StockStatus.MEDIUM
    return StockStatus.HIGH


def format_price(price: Decimal, config: CatalogConfig) -> str:
    """Render a price as ``$2.50``, rounding half up."""
    quantum = Decimal(1).scaleb(-config.price_decimal_places)
    rounded = Decimal(price).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{config.currency_symbol}{rounded}"


def category_view(category: Category, active_product_count: int) -> CategoryView:
    return CategoryView(
        id=category.id,
        name=category.name,
        description=category.description,
        deleted=category.deleted,
        active_product_count=active_product_count,
        status=CategoryStatus.ACTIVE if category.is_active else CategoryStatus.DELETED,
    )


def product_view(
    product: Product, category_name: str | None, config: CatalogConfig
) -> ProductView:
    return ProductView(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
        category_id=product.category_id,
        category_name=category_name,
        deleted=product.deleted,
        stock_status=stock_status(product.stock, config),
        formatted_price=format_price(product.price, config),
    )
