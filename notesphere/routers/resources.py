import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from notesphere.deps import get_repository, require_admin
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.common import MessageOut
from notesphere.schemas.content import ResourceCreate, ResourceOut
from notesphere.schemas.library import ResourceFileOut
from notesphere.services.downloads import (
    download_name_for, file_response, placeholder_response, placeholder_text,
)
from notesphere.services.uploads import upload_path

log = logging.getLogger(__name__)

router = APIRouter(prefix="/resources", tags=["resources"])

@router.get("", response_model=list[ResourceOut])
def list_resources(
    class_id: int | None = Query(None, alias="classId"),
    subject_id: int | None = Query(None, alias="subjectId"),
    type: str | None = None,
    repo: CatalogRepository = Depends(get_repository),
):
    return repo.get_resources(class_id=class_id, subject_id=subject_id, type=type)

# Catálogo plano (archivos subidos por categoría)
@router.get("/featured", response_model=list[ResourceFileOut])
def featured_resource_files(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_featured_resource_files()

@router.get("/recent", response_model=list[ResourceFileOut])
def recent_resource_files(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_recent_resource_files()

@router.get("/{resource_id}", response_model=ResourceOut)
def get_resource(resource_id: int, repo: CatalogRepository = Depends(get_repository)):
    resource = repo.get_resource(resource_id)
    if not resource:
        raise HTTPException(status_code=404, detail=f"Resource {resource_id} not found")
    return resource

@router.post("", response_model=ResourceOut, status_code=201, dependencies=[Depends(require_admin)])
def create_resource(payload: ResourceCreate, repo: CatalogRepository = Depends(get_repository)):
    return repo.create_resource(payload)

@router.delete("/{resource_id}", response_model=MessageOut, dependencies=[Depends(require_admin)])
def delete_resource(resource_id: int, repo: CatalogRepository = Depends(get_repository)):
    if not repo.delete_resource(resource_id):
        raise HTTPException(status_code=404, detail=f"Resource {resource_id} not found")
    return {"message": "Resource deleted successfully"}

@router.get("/files/{file_id}/download")
def download_resource_file(file_id: int, request: Request, repo: CatalogRepository = Depends(get_repository)):
    """Archivo subido (catálogo plano); sus ids no se mezclan con los de /resources/{id}."""
    rfile = repo.get_resource_file(file_id)
    if not rfile:
        raise HTTPException(status_code=404, detail="Resource not found")
    path = upload_path(request.app.state.uploads_dir, rfile.file_name)
    if not path.is_file():
        log.warning("resource file %s missing on disk: %s", rfile.id, path)
        raise HTTPException(status_code=404, detail="File not found")
    return file_response(path, rfile.file_name)

@router.get("/{resource_id}/download")
def download_resource(resource_id: int, request: Request, repo: CatalogRepository = Depends(get_repository)):
    """El mismo recurso que devuelve /resources/{id}; sin archivo propio, se genera un texto."""
    resource = repo.get_resource(resource_id)
    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")

    repo.increment_resource_count(resource.id)
    content = placeholder_text(resource.title, resource.description, {
        "Type": resource.type,
        "Details": resource.subtitle,
    })
    return placeholder_response(request.app.state.temp_dir, download_name_for(resource.title), content)
