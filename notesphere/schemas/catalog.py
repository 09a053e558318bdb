from typing import Literal, Optional
from pydantic import Field
from notesphere.schemas.common import CamelModel

ChapterStatus = Literal["new", "in-progress", "completed"]

# ========== Class ==========
class ClassCreate(CamelModel):
    name: str = Field(min_length=1, max_length=80)
    icon: str
    description: Optional[str] = None
    order: int

class ClassOut(ClassCreate):
    id: int

# ========== Subject ==========
class SubjectCreate(CamelModel):
    name: str = Field(min_length=1)
    class_id: int
    description: Optional[str] = None
    icon: Optional[str] = None

class SubjectOut(SubjectCreate):
    id: int

# ========== Chapter ==========
class ChapterCreate(CamelModel):
    name: str = Field(min_length=1)
    subject_id: int
    description: Optional[str] = None
    lessons: int = Field(0, ge=0)
    practices: int = Field(0, ge=0)
    status: ChapterStatus = "new"
    order: int

class ChapterOut(ChapterCreate):
    id: int

# ========== Topic ==========
class TopicCreate(CamelModel):
    name: str = Field(min_length=1)
    chapter_id: int
    description: Optional[str] = None
    order: int

class TopicOut(TopicCreate):
    id: int
