from datetime import datetime
from typing import Optional
from pydantic import Field
from notesphere.schemas.common import CamelModel

class CategoryCreate(CamelModel):
    slug: str = Field(min_length=1, max_length=80)
    name: str
    description: str = ""

class CategoryOut(CategoryCreate):
    id: int

class ResourceTypeCreate(CategoryCreate):
    pass

class ResourceTypeOut(ResourceTypeCreate):
    id: int

class ResourceFileCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    file_size: str
    file_name: str
    file_path: str
    category_id: int
    category_name: str
    type_id: int
    type_name: str
    is_featured: bool = False
    uploaded_by: Optional[int] = None

class ResourceFileOut(ResourceFileCreate):
    id: int
    created_at: datetime
    updated_at: datetime
