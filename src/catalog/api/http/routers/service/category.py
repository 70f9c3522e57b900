"""Category API router: lifecycle commands and read projections."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.catalog.api.http.deps import get_category_manager, get_projection_service
from src.catalog.core.models import CategoryCommand, CategoryView, CreatedResponse
from src.catalog.core.services import CatalogProjectionService, CategoryLifecycleManager

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    command: CategoryCommand,
    manager: CategoryLifecycleManager = Depends(get_category_manager),
) -> CreatedResponse:
    """Create a new active category."""
    return CreatedResponse(id=manager.create(command))


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_category(
    category_id: int,
    command: CategoryCommand,
    manager: CategoryLifecycleManager = Depends(get_category_manager),
) -> Response:
    """Rename or re-describe an active category."""
    manager.update(category_id, command)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    manager: CategoryLifecycleManager = Depends(get_category_manager),
) -> Response:
    """Soft-delete a category that has no active products."""
    manager.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{category_id}/restore", status_code=status.HTTP_204_NO_CONTENT)
def restore_category(
    category_id: int,
    manager: CategoryLifecycleManager = Depends(get_category_manager),
) -> Response:
    """Bring a soft-deleted category back."""
    manager.restore(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[CategoryView])
def list_categories(
    name: str | None = Query(default=None, description="Case-insensitive name fragment"),
    projections: CatalogProjectionService = Depends(get_projection_service),
) -> list[CategoryView]:
    """List active categories with their active product counts."""
    return projections.list_categories(name_contains=name)


@router.get("/deleted", response_model=list[CategoryView])
def list_deleted_categories(
    projections: CatalogProjectionService = Depends(get_projection_service),
) -> list[CategoryView]:
    return projections.list_deleted_categories()


@router.get("/{category_id}", response_model=CategoryView)
def get_category(
    category_id: int,
    projections: CatalogProjectionService = Depends(get_projection_service),
) -> CategoryView:
    """Get an active category by ID."""
    category = projections.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category
