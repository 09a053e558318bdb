from fastapi import APIRouter, Depends, HTTPException
from notesphere.deps import get_repository, require_admin
from notesphere.repositories.base import CatalogRepository, DuplicateNameError, parse_numeric_key
from notesphere.schemas.catalog import ClassCreate, ClassOut, SubjectOut

router = APIRouter(prefix="/classes", tags=["classes"])

@router.get("", response_model=list[ClassOut])
def list_classes(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_all_classes()

@router.get("/{class_key}", response_model=ClassOut)
def get_class(class_key: str, repo: CatalogRepository = Depends(get_repository)):
    # "3" -> id 3; "JEE" o "10" (si no hay id 10) -> por nombre
    cls = repo.resolve_class(class_key)
    if not cls:
        raise HTTPException(status_code=404, detail=f"Class '{class_key}' not found")
    return cls

@router.post("", response_model=ClassOut, status_code=201, dependencies=[Depends(require_admin)])
def create_class(payload: ClassCreate, repo: CatalogRepository = Depends(get_repository)):
    try:
        return repo.create_class(payload)
    except DuplicateNameError:
        raise HTTPException(status_code=400, detail=f"Class '{payload.name}' already exists")

@router.get("/{class_key}/subjects", response_model=list[SubjectOut])
def list_class_subjects(class_key: str, repo: CatalogRepository = Depends(get_repository)):
    cls = repo.resolve_class(class_key)
    if not cls:
        return []
    return repo.get_subjects_by_class_id(cls.id)

@router.get("/{class_key}/subjects/{subject_key}", response_model=SubjectOut)
def get_class_subject(class_key: str, subject_key: str, repo: CatalogRepository = Depends(get_repository)):
    cls = repo.resolve_class(class_key)
    if not cls:
        raise HTTPException(status_code=404, detail=f"Class '{class_key}' not found")

    subject = None
    subject_id = parse_numeric_key(subject_key)
    if subject_id is not None:
        subject = repo.get_subject(subject_id)
        if subject and subject.class_id != cls.id:
            subject = None
    if subject is None:
        subject = repo.get_subject_by_class_and_name(cls.id, subject_key)
    if not subject:
        raise HTTPException(status_code=404, detail=f"Subject '{subject_key}' not found in class '{cls.name}'")
    return subject
