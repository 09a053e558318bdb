from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from notesphere.deps import get_repository, require_admin
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.common import MessageOut
from notesphere.schemas.content import BookCreate, BookOut
from notesphere.services.downloads import (
    download_name_for, file_response, placeholder_response, placeholder_text,
)
from notesphere.services.uploads import upload_path


router = APIRouter(prefix="/books", tags=["books"])

BOOK_MEDIA_TYPES = {
    "PDF": "application/pdf",
    "EPUB": "application/epub+zip",
    "MOBI": "application/x-mobipocket-ebook",
}

@router.get("", response_model=list[BookOut])
def list_books(
    class_id: int | None = Query(None, alias="classId"),
    subject_id: int | None = Query(None, alias="subjectId"),
    repo: CatalogRepository = Depends(get_repository),
):
    return repo.get_books(class_id=class_id, subject_id=subject_id)

# /featured y /recent antes que /{book_id}
@router.get("/featured", response_model=list[BookOut])
def featured_books(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_featured_books()

@router.get("/recent", response_model=list[BookOut])
def recent_books(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_recent_books()

@router.get("/{book_id}", response_model=BookOut)
def get_book(book_id: int, repo: CatalogRepository = Depends(get_repository)):
    book = repo.get_book(book_id)
    if not book:
        raise HTTPException(status_code=404, detail=f"Book {book_id} not found")
    return book

@router.post("", response_model=BookOut, status_code=201, dependencies=[Depends(require_admin)])
def create_book(payload: BookCreate, repo: CatalogRepository = Depends(get_repository)):
    return repo.create_book(payload)

@router.delete("/{book_id}", response_model=MessageOut, dependencies=[Depends(require_admin)])
def delete_book(book_id: int, repo: CatalogRepository = Depends(get_repository)):
    if not repo.delete_book(book_id):
        raise HTTPException(status_code=404, detail=f"Book {book_id} not found")
    return {"message": "Book deleted successfully"}

@router.get("/{book_id}/download")
def download_book(book_id: int, request: Request, repo: CatalogRepository = Depends(get_repository)):
    """
    /uploads/... -> el archivo subido (404 si falta en disco)
    http(s)://... -> redirección
    otro valor   -> texto de ejemplo generado al vuelo
    Solo una descarga resuelta incrementa downloadCount.
    """
    book = repo.get_book(book_id)
    if not book:
        raise HTTPException(status_code=404, detail=f"Book {book_id} not found")

    url = (book.file_url or "").strip()
    if url.startswith("/uploads/"):
        path = upload_path(request.app.state.uploads_dir, url.rsplit("/", 1)[-1])
        if not path.is_file():
            raise HTTPException(status_code=404, detail="File not found")
        repo.increment_book_downloads(book.id)
        return file_response(
            path,
            download_name_for(book.title, path.suffix or ".pdf"),
            media_type=BOOK_MEDIA_TYPES.get(book.format, "application/octet-stream"),
        )

    if url.startswith(("http://", "https://")):
        repo.increment_book_downloads(book.id)
        return RedirectResponse(url, status_code=307)

    repo.increment_book_downloads(book.id)
    content = placeholder_text(book.title, book.description, {
        "Author": book.author or "Unknown",
        "Format": book.format,
        "Rating": f"{book.rating / 10:.1f}",
    })
    return placeholder_response(request.app.state.temp_dir, download_name_for(book.title), content)
