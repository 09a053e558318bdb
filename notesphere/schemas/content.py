from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field
from notesphere.schemas.common import CamelModel

BookFormat = Literal["PDF", "EPUB", "MOBI"]
ResourceKind = Literal["video", "paper", "experiment", "notes", "document", "link"]

class BookCreate(CamelModel):
    title: str = Field(min_length=1)
    author: Optional[str] = None
    description: str
    cover_image: Optional[str] = None
    format: BookFormat
    page_count: Optional[int] = Field(None, ge=0)
    file_url: str
    subject_id: int
    class_id: int
    topics: List[str] = Field(default_factory=list)
    ref_number: Optional[str] = Field(None, max_length=10)
    featured: bool = False
    recommended: bool = False
    rating: int = Field(0, ge=0, le=50)  # escala x10: 47 -> 4.7

class BookOut(BookCreate):
    id: int
    download_count: int = Field(0, ge=0)
    created_at: datetime

class ResourceCreate(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: ResourceKind
    icon: Optional[str] = None
    count: int = Field(0, ge=0)
    # subtítulo libre ("12 videos • 4h 30m"); en JSON se llama metadata
    subtitle: str = Field("", alias="metadata")
    subject_id: int
    class_id: int
    chapter_id: Optional[int] = None
    featured: bool = False

class ResourceOut(ResourceCreate):
    id: int
    created_at: datetime
