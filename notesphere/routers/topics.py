from fastapi import APIRouter, Depends, HTTPException
from notesphere.deps import get_repository, require_admin
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.catalog import TopicCreate, TopicOut

router = APIRouter(prefix="/topics", tags=["topics"])

@router.get("/{topic_id}", response_model=TopicOut)
def get_topic(topic_id: int, repo: CatalogRepository = Depends(get_repository)):
    topic = repo.get_topic(topic_id)
    if not topic:
        raise HTTPException(status_code=404, detail=f"Topic {topic_id} not found")
    return topic

@router.post("", response_model=TopicOut, status_code=201, dependencies=[Depends(require_admin)])
def create_topic(payload: TopicCreate, repo: CatalogRepository = Depends(get_repository)):
    return repo.create_topic(payload)
