from fastapi import APIRouter, Depends, HTTPException, Query
from notesphere.deps import get_repository, require_admin
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.catalog import ChapterCreate, ChapterOut, TopicOut
from notesphere.schemas.common import MessageOut

router = APIRouter(prefix="/chapters", tags=["chapters"])

@router.get("", response_model=list[ChapterOut])
def list_chapters(
    subject_id: int | None = Query(None, alias="subjectId"),
    repo: CatalogRepository = Depends(get_repository),
):
    if subject_id is not None:
        return repo.get_chapters_by_subject_id(subject_id)
    return repo.get_all_chapters()

@router.get("/{chapter_id}", response_model=ChapterOut)
def get_chapter(chapter_id: int, repo: CatalogRepository = Depends(get_repository)):
    chapter = repo.get_chapter(chapter_id)
    if not chapter:
        raise HTTPException(status_code=404, detail=f"Chapter {chapter_id} not found")
    return chapter

@router.post("", response_model=ChapterOut, status_code=201, dependencies=[Depends(require_admin)])
def create_chapter(payload: ChapterCreate, repo: CatalogRepository = Depends(get_repository)):
    return repo.create_chapter(payload)

@router.delete("/{chapter_id}", response_model=MessageOut, dependencies=[Depends(require_admin)])
def delete_chapter(chapter_id: int, repo: CatalogRepository = Depends(get_repository)):
    # sin cascada: los topics del capítulo quedan huérfanos
    if not repo.delete_chapter(chapter_id):
        raise HTTPException(status_code=404, detail=f"Chapter {chapter_id} not found")
    return {"message": "Chapter deleted successfully"}

@router.get("/{chapter_id}/topics", response_model=list[TopicOut])
def list_chapter_topics(chapter_id: int, repo: CatalogRepository = Depends(get_repository)):
    return repo.get_topics_by_chapter_id(chapter_id)
