from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from notesphere.db import Base

class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(20), index=True, nullable=False)  # video | paper | experiment | notes | ...
    icon = Column(String(120), nullable=True)
    count = Column(Integer, default=0, nullable=False)
    # "metadata" está reservado por la declarative base
    subtitle = Column("metadata", String(255), nullable=False, default="")
    subject_id = Column(Integer, index=True, nullable=False)
    class_id = Column(Integer, index=True, nullable=False)
    chapter_id = Column(Integer, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
