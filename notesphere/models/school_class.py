from sqlalchemy import Column, Integer, String, Text
from notesphere.db import Base

class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), unique=True, index=True, nullable=False)  # "10", "JEE", ...
    icon = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    order = Column("display_order", Integer, nullable=False)
