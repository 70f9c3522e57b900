"""Business-rule violations raised by the catalog lifecycle managers.

Each class is one failure kind; ``code`` carries the kind name so a transport
layer can map kinds to its own status codes without inspecting messages.
"""


class CatalogError(Exception):
    """Base class for catalog business-rule violations."""

    code = "CatalogError"

    def __init__(self, message: str, entity: str, entity_id: int | None = None):
        self.message = message
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entity={self.entity!r}, entity_id={self.entity_id!r})"


class NotFoundError(CatalogError):
    """No record with the id exists in the required scope."""

    code = "NotFound"

    def __init__(self, entity: str, entity_id: int, active_only: bool = False):
        qualifier = "active " if active_only else ""
        super().__init__(f"No {qualifier}{entity.lower()} with id {entity_id}", entity, entity_id)
        self.active_only = active_only


class AlreadyDeletedError(CatalogError):
    code = "AlreadyDeleted"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} is already deleted", entity, entity_id)


class NotDeletedError(CatalogError):
    code = "NotDeleted"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} is not deleted", entity, entity_id)


class DuplicateNameError(CatalogError):
    """Another active record of the same type already uses the name."""

    code = "DuplicateName"

    def __init__(self, entity: str, name: str, entity_id: int | None = None):
        super().__init__(
            f"An active {entity.lower()} named '{name}' already exists", entity, entity_id
        )
        self.name = name


class CategoryNotFoundError(CatalogError):
    """The referenced category is missing or deleted."""

    code = "CategoryNotFound"

    def __init__(self, category_id: int, product_id: int | None = None):
        super().__init__(
            f"No active category with id {category_id}", "Product", product_id
        )
        self.category_id = category_id


class CategoryInactiveError(CatalogError):
    """A product cannot be restored while its category is deleted."""

    code = "CategoryInactive"

    def __init__(self, product_id: int, category_id: int):
        super().__init__(
            f"Product {product_id} cannot be restored: category {category_id} is deleted",
            "Product",
            product_id,
        )
        self.category_id = category_id


class HasActiveChildrenError(CatalogError):
    """A category cannot be deleted while active products reference it."""

    code = "HasActiveChildren"

    def __init__(self, category_id: int, active_products: int):
        super().__init__(
            f"Category {category_id} still has {active_products} active product(s)",
            "Category",
            category_id,
        )
        self.active_products = active_products
