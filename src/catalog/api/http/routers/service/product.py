"""Product API router: lifecycle commands and read projections."""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.catalog.api.http.deps import get_product_manager, get_projection_service
from src.catalog.core.models import CreatedResponse, ProductCommand, ProductView
from src.catalog.core.services import CatalogProjectionService, ProductLifecycleManager

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    command: ProductCommand,
    manager: ProductLifecycleManager = Depends(get_product_manager),
) -> CreatedResponse:
    """Create a new active product under an active category."""
    return CreatedResponse(id=manager.create(command))


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    product_id: int,
    command: ProductCommand,
    manager: ProductLifecycleManager = Depends(get_product_manager),
) -> Response:
    """Overwrite an active product, possibly moving it to another category."""
    manager.update(product_id, command)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    manager: ProductLifecycleManager = Depends(get_product_manager),
) -> Response:
    manager.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{product_id}/restore", status_code=status.HTTP_204_NO_CONTENT)
def restore_product(
    product_id: int,
    manager: ProductLifecycleManager = Depends(get_product_manager),
) -> Response:
    manager.restore(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[ProductView])
def list_products(
    name: str | None = Query(default=None, description="Case-insensitive name fragment"),
    category_id: int | None = Query(default=None, ge=1),
    min_price: Decimal | None = Query(default=None, ge=0),
    max_price: Decimal | None = Query(default=None, ge=0),
    stock_above: int | None = Query(
        default=None, ge=0, description="Only products with more units than this"
    ),
    projections: CatalogProjectionService = Depends(get_projection_service),
) -> list[ProductView]:
    """List active products; every filter is optional and they combine."""
    return projections.list_products(
        name_contains=name,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        stock_above=stock_above,
    )


@router.get("/deleted", response_model=list[ProductView])
def list_deleted_products(
    projections: CatalogProjectionService = Depends(get_projection_service),
) -> list[ProductView]:
    return projections.list_deleted_products()


@router.get("/{product_id}", response_model=ProductView)
def get_product(
    product_id: int,
    projections: CatalogProjectionService = Depends(get_projection_service),
) -> ProductView:
    """Get an active product by ID."""
    product = projections.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
