import logging
from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from pydantic import ValidationError

from notesphere.core.errors import format_validation_errors
from notesphere.deps import get_repository, require_admin
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.common import MessageOut
from notesphere.schemas.content import BookCreate, BookOut
from notesphere.schemas.library import ResourceFileCreate, ResourceFileOut
from notesphere.schemas.user import UserRecord
from notesphere.services.uploads import UploadRejected, remove_upload, save_pdf

log = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

def _store_pdf(request: Request, upload: UploadFile | None, field: str):
    try:
        return save_pdf(upload, request.app.state.uploads_dir, field, request.app.state.max_upload_size)
    except UploadRejected as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/resources", response_model=list[ResourceFileOut], dependencies=[Depends(require_admin)])
def list_resource_files(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_all_resource_files()

@router.post("/resources", response_model=ResourceFileOut, status_code=201)
def upload_resource(
    request: Request,
    title: str = Form(...),
    description: str = Form(""),
    category_id: str = Form(..., alias="categoryId"),
    type_id: str = Form(..., alias="typeId"),
    is_featured: bool = Form(False, alias="isFeatured"),
    pdf_file: UploadFile | None = File(None, alias="pdfFile"),
    admin: UserRecord = Depends(require_admin),
    repo: CatalogRepository = Depends(get_repository),
):
    # El archivo se valida (tipo y tamaño) antes de tocar el repositorio
    stored = _store_pdf(request, pdf_file, "pdfFile")
    uploads_dir = request.app.state.uploads_dir

    category = repo.resolve_category(category_id)
    if not category:
        remove_upload(uploads_dir, stored.file_name)
        raise HTTPException(status_code=400, detail="Invalid category")
    rtype = repo.resolve_resource_type(type_id)
    if not rtype:
        remove_upload(uploads_dir, stored.file_name)
        raise HTTPException(status_code=400, detail="Invalid resource type")

    try:
        data = ResourceFileCreate(
            title=title,
            description=description,
            file_size=stored.human_size,
            file_name=stored.file_name,
            file_path=stored.file_path,
            category_id=category.id,
            category_name=category.name,
            type_id=rtype.id,
            type_name=rtype.name,
            is_featured=is_featured,
            uploaded_by=admin.id,
        )
    except ValidationError as e:
        remove_upload(uploads_dir, stored.file_name)
        raise HTTPException(status_code=400, detail=format_validation_errors(e.errors()))

    try:
        rfile = repo.create_resource_file(data)
    except Exception:
        remove_upload(uploads_dir, stored.file_name)
        raise
    log.info("admin %s uploaded resource %s (%s)", admin.username, rfile.id, rfile.file_name)
    return rfile

@router.delete("/resources/{resource_id}", response_model=MessageOut, dependencies=[Depends(require_admin)])
def delete_resource_file(resource_id: int, request: Request, repo: CatalogRepository = Depends(get_repository)):
    rfile = repo.get_resource_file(resource_id)
    if not rfile:
        raise HTTPException(status_code=404, detail="Resource not found")
    remove_upload(request.app.state.uploads_dir, rfile.file_name)
    repo.delete_resource_file(resource_id)
    return {"message": "Resource deleted successfully"}

@router.post("/books", response_model=BookOut, status_code=201)
def upload_book(
    request: Request,
    title: str = Form(...),
    description: str = Form(...),
    class_id: int = Form(..., alias="classId"),
    subject_id: int = Form(..., alias="subjectId"),
    author: str | None = Form(None),
    format: str = Form("PDF"),
    page_count: int | None = Form(None, alias="pageCount"),
    topics: str = Form(""),
    ref_number: str | None = Form(None, alias="refNumber"),
    cover_image: str | None = Form(None, alias="coverImage"),
    featured: bool = Form(False),
    recommended: bool = Form(False),
    rating: int = Form(0),
    book_file: UploadFile | None = File(None, alias="bookFile"),
    admin: UserRecord = Depends(require_admin),
    repo: CatalogRepository = Depends(get_repository),
):
    # topics llega como "Optics, Waves"
    try:
        data = BookCreate(
            title=title, description=description, class_id=class_id, subject_id=subject_id,
            author=author, format=format, page_count=page_count,
            topics=[t.strip() for t in topics.split(",") if t.strip()],
            ref_number=ref_number, cover_image=cover_image,
            featured=featured, recommended=recommended, rating=rating, file_url="",
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=format_validation_errors(e.errors()))

    stored = _store_pdf(request, book_file, "bookFile")
    try:
        book = repo.create_book(data.model_copy(update={"file_url": stored.file_path}))
    except Exception:
        remove_upload(request.app.state.uploads_dir, stored.file_name)
        raise
    log.info("admin %s uploaded book %s (%s)", admin.username, book.id, stored.file_name)
    return book
