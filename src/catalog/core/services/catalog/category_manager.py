from loguru import logger
from sqlalchemy.exc import IntegrityError

from src.catalog.core.models.catalog import CategoryCommand
from src.catalog.core.services.catalog.errors import (
    AlreadyDeletedError,
    DuplicateNameError,
    HasActiveChildrenError,
    NotDeletedError,
    NotFoundError,
)
from src.catalog.core.services.catalog.transforms import (
    apply_category_command,
    category_from_command,
)
from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.entities.core import RecordScope, name_key
from src.catalog.entities.service.category import CategoryRepository
from src.catalog.entities.service.product import ProductRepository

ENTITY = "Category"


class CategoryLifecycleManager:
    """Command side for categories.

    Every public method runs in one transaction and checks, in order,
    existence, dependent products, then name uniqueness, so the first
    violated rule is the one reported.
    """

    def __init__(self, database: DbSessionService):
        self._database = database

    def create(self, command: CategoryCommand) -> int:
        with self._database.session_scope() as session:
            categories = CategoryRepository(session)

            if categories.exists_by_name(command.name):
                raise DuplicateNameError(ENTITY, command.name)

            try:
                category_id = categories.insert(category_from_command(command))
            except IntegrityError as e:
                raise DuplicateNameError(ENTITY, command.name) from e

        logger.info("Category created", category_id=category_id, name=command.name)
        return category_id

    def update(self, category_id: int, command: CategoryCommand) -> None:
        with self._database.session_scope() as session:
            categories = CategoryRepository(session)

            category = categories.find_by_id(category_id, RecordScope.ACTIVE_ONLY)
            if category is None:
                raise NotFoundError(ENTITY, category_id, active_only=True)

            renamed = name_key(category.name) != name_key(command.name)
            if renamed and categories.exists_by_name(command.name):
                raise DuplicateNameError(ENTITY, command.name, category_id)

            try:
                categories.save(apply_category_command(category, command))
            except IntegrityError as e:
                raise DuplicateNameError(ENTITY, command.name, category_id) from e

        logger.info("Category updated", category_id=category_id, name=command.name)

    def delete(self, category_id: int) -> None:
        with self._database.session_scope() as session:
            categories = CategoryRepository(session)
            products = ProductRepository(session)

            category = categories.find_by_id(category_id, RecordScope.INCLUDE_DELETED)
            if category is None:
                raise NotFoundError(ENTITY, category_id)
            if not category.is_active:
                raise AlreadyDeletedError(ENTITY, category_id)

            active_products = products.count_active_by_category(category_id)
            if active_products > 0:
                logger.warning(
                    "Refusing to delete category with active products",
                    category_id=category_id,
                    active_products=active_products,
                )
                raise HasActiveChildrenError(category_id, active_products)

            categories.set_deleted(category_id, True)

        logger.info("Category deleted", category_id=category_id)

    def restore(self, category_id: int) -> None:
        with self._database.session_scope() as session:
            categories = CategoryRepository(session)

            category = categories.find_by_id(category_id, RecordScope.INCLUDE_DELETED)
            if category is None:
                raise NotFoundError(ENTITY, category_id)
            if category.is_active:
                raise NotDeletedError(ENTITY, category_id)

            if categories.exists_by_name(category.name):
                raise DuplicateNameError(ENTITY, category.name, category_id)

            try:
                categories.set_deleted(category_id, False)
            except IntegrityError as e:
                raise DuplicateNameError(ENTITY, category.name, category_id) from e

        logger.info("Category restored", category_id=category_id)
