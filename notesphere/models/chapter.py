from sqlalchemy import Column, Integer, String, Text
from notesphere.db import Base

class Chapter(Base):
    __tablename__ = "chapters"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    subject_id = Column(Integer, index=True, nullable=False)
    description = Column(Text, nullable=True)
    lessons = Column(Integer, nullable=False, default=0)
    practices = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="new")  # new | in-progress | completed
    order = Column("display_order", Integer, nullable=False)
