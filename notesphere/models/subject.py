from sqlalchemy import Column, Integer, String, Text
from notesphere.db import Base

class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(160), nullable=False)
    class_id = Column(Integer, index=True, nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(String(120), nullable=True)
