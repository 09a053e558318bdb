from fastapi import APIRouter, Depends, HTTPException, Query
from notesphere.deps import get_repository, require_admin
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.catalog import SubjectCreate, SubjectOut, ChapterOut
from notesphere.schemas.content import ResourceOut

router = APIRouter(prefix="/subjects", tags=["subjects"])

@router.get("", response_model=list[SubjectOut])
def list_subjects(
    class_id: int | None = Query(None, alias="classId"),
    repo: CatalogRepository = Depends(get_repository),
):
    if class_id is not None:
        return repo.get_subjects_by_class_id(class_id)
    return repo.get_all_subjects()

@router.get("/{subject_id}", response_model=SubjectOut)
def get_subject(subject_id: int, repo: CatalogRepository = Depends(get_repository)):
    subject = repo.get_subject(subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail=f"Subject {subject_id} not found")
    return subject

@router.post("", response_model=SubjectOut, status_code=201, dependencies=[Depends(require_admin)])
def create_subject(payload: SubjectCreate, repo: CatalogRepository = Depends(get_repository)):
    return repo.create_subject(payload)

@router.get("/{subject_id}/chapters", response_model=list[ChapterOut])
def list_subject_chapters(subject_id: int, repo: CatalogRepository = Depends(get_repository)):
    return repo.get_chapters_by_subject_id(subject_id)

@router.get("/{subject_id}/resources", response_model=list[ResourceOut])
def list_subject_resources(subject_id: int, repo: CatalogRepository = Depends(get_repository)):
    return repo.get_resources(subject_id=subject_id)
