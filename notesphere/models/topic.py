from sqlalchemy import Column, Integer, String, Text
from notesphere.db import Base

class Topic(Base):
    __tablename__ = "topics"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    chapter_id = Column(Integer, index=True, nullable=False)
    description = Column(Text, nullable=True)
    order = Column("display_order", Integer, nullable=False)
