from loguru import logger
from sqlalchemy.exc import IntegrityError

from src.catalog.core.models.catalog import ProductCommand
from src.catalog.core.services.catalog.errors import (
    AlreadyDeletedError,
    CategoryInactiveError,
    CategoryNotFoundError,
    DuplicateNameError,
    NotDeletedError,
    NotFoundError,
)
from src.catalog.core.services.catalog.transforms import (
    apply_product_command,
    product_from_command,
)
from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.entities.core import RecordScope, name_key
from src.catalog.entities.service.category import CategoryRepository
from src.catalog.entities.service.product import ProductRepository

ENTITY = "Product"


class ProductLifecycleManager:
    """Command side for products.

    Checks run in the order existence, category state, name uniqueness.
    Category lookups go through the same transaction as the product write,
    so a category cannot be deleted between the check and the write.
    """

    def __init__(self, database: DbSessionService):
        self._database = database

    def create(self, command: ProductCommand) -> int:
        with self._database.session_scope() as session:
            products = ProductRepository(session)
            categories = CategoryRepository(session)

            if not categories.exists_by_id(command.category_id, RecordScope.ACTIVE_ONLY):
                raise CategoryNotFoundError(command.category_id)

            if products.exists_by_name(command.name):
                raise DuplicateNameError(ENTITY, command.name)

            try:
                product_id = products.insert(product_from_command(command))
            except IntegrityError as e:
                raise DuplicateNameError(ENTITY, command.name) from e

        logger.info(
            "Product created",
            product_id=product_id,
            name=command.name,
            category_id=command.category_id,
        )
        return product_id

    def update(self, product_id: int, command: ProductCommand) -> None:
        with self._database.session_scope() as session:
            products = ProductRepository(session)
            categories = CategoryRepository(session)

            product = products.find_by_id(product_id, RecordScope.ACTIVE_ONLY)
            if product is None:
                raise NotFoundError(ENTITY, product_id, active_only=True)

            if not categories.exists_by_id(command.category_id, RecordScope.ACTIVE_ONLY):
                raise CategoryNotFoundError(command.category_id, product_id)

            renamed = name_key(product.name) != name_key(command.name)
            if renamed and products.exists_by_name(command.name):
                raise DuplicateNameError(ENTITY, command.name, product_id)

            try:
                products.save(apply_product_command(product, command))
            except IntegrityError as e:
                raise DuplicateNameError(ENTITY, command.name, product_id) from e

        if product.category_id != command.category_id:
            logger.info(
                "Product moved to another category",
                product_id=product_id,
                from_category_id=product.category_id,
                to_category_id=command.category_id,
            )
        logger.info("Product updated", product_id=product_id, name=command.name)

    def delete(self, product_id: int) -> None:
        with self._database.session_scope() as session:
            products = ProductRepository(session)

            product = products.find_by_id(product_id, RecordScope.INCLUDE_DELETED)
            if product is None:
                raise NotFoundError(ENTITY, product_id)
            if not product.is_active:
                raise AlreadyDeletedError(ENTITY, product_id)

            products.set_deleted(product_id, True)

        logger.info("Product deleted", product_id=product_id)

    def restore(self, product_id: int) -> None:
        with self._database.session_scope() as session:
            products = ProductRepository(session)
            categories = CategoryRepository(session)

            product = products.find_by_id(product_id, RecordScope.INCLUDE_DELETED)
            if product is None:
                raise NotFoundError(ENTITY, product_id)
            if product.is_active:
                raise NotDeletedError(ENTITY, product_id)

            if not categories.exists_by_id(product.category_id, RecordScope.ACTIVE_ONLY):
                logger.warning(
                    "Refusing to restore product under a deleted category",
                    product_id=product_id,
                    category_id=product.category_id,
                )
                raise CategoryInactiveError(product_id, product.category_id)

            if products.exists_by_name(product.name):
                raise DuplicateNameError(ENTITY, product.name, product_id)

            try:
                products.set_deleted(product_id, False)
            except IntegrityError as e:
                raise DuplicateNameError(ENTITY, product.name, product_id) from e

        logger.info("Product restored", product_id=product_id)
