from notesphere.models.user import User
from notesphere.models.school_class import SchoolClass
from notesphere.models.subject import Subject
from notesphere.models.chapter import Chapter
from notesphere.models.topic import Topic
from notesphere.models.book import Book
from notesphere.models.resource import Resource
from notesphere.models.category import Category, ResourceType
from notesphere.models.resource_file import ResourceFile

__all__ = [
    "User", "SchoolClass", "Subject", "Chapter", "Topic",
    "Book", "Resource", "Category", "ResourceType", "ResourceFile",
]
