from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON
from notesphere.db import Base

class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=True)
    description = Column(Text, nullable=False)
    cover_image = Column(String(512), nullable=True)
    format = Column(String(10), nullable=False)             # PDF | EPUB | MOBI
    page_count = Column(Integer, nullable=True)
    file_url = Column(String(512), nullable=False)
    subject_id = Column(Integer, index=True, nullable=False)
    class_id = Column(Integer, index=True, nullable=False)
    topics = Column(JSON, nullable=False, default=list)     # ["Optics", "Waves"]
    ref_number = Column(String(10), nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    recommended = Column(Boolean, default=False, nullable=False)
    download_count = Column(Integer, default=0, nullable=False)
    rating = Column(Integer, default=0, nullable=False)     # 0..50, se muestra /10
    created_at = Column(DateTime(timezone=True), nullable=False)
