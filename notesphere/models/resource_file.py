from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from notesphere.db import Base

class ResourceFile(Base):
    __tablename__ = "resource_files"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    file_size = Column(String(20), nullable=False)      # "1.2 MB"
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(512), nullable=False)     # /uploads/<file_name>
    category_id = Column(Integer, index=True, nullable=False)
    category_name = Column(String(120), nullable=False)  # copia al escribir
    type_id = Column(Integer, index=True, nullable=False)
    type_name = Column(String(120), nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    uploaded_by = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
