from fastapi import APIRouter, Depends, HTTPException
from notesphere.deps import get_repository
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.library import CategoryOut, ResourceTypeOut, ResourceFileOut

router = APIRouter(tags=["library"])

@router.get("/categories", response_model=list[CategoryOut])
def list_categories(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_all_categories()

@router.get("/categories/{category_key}", response_model=CategoryOut)
def get_category(category_key: str, repo: CatalogRepository = Depends(get_repository)):
    category = repo.resolve_category(category_key)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category

@router.get("/categories/{category_key}/resources", response_model=list[ResourceFileOut])
def list_category_resources(category_key: str, repo: CatalogRepository = Depends(get_repository)):
    category = repo.resolve_category(category_key)
    if not category:
        return []
    return repo.get_resource_files_by_category(category.id)

@router.get("/resource-types", response_model=list[ResourceTypeOut])
def list_resource_types(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_all_resource_types()
