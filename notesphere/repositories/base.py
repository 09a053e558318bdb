"""
Contrato único del catálogo.

Dos implementaciones lo cumplen (memoria y SQLAlchemy) y deben ser
intercambiables: mismos filtros, mismo orden, mismos valores por defecto.
Las lecturas devuelven modelos Pydantic; un id inexistente devuelve None.
No se valida integridad referencial al insertar.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from notesphere.schemas.user import UserRecord
from notesphere.schemas.catalog import (
    ClassCreate, ClassOut, SubjectCreate, SubjectOut,
    ChapterCreate, ChapterOut, TopicCreate, TopicOut,
)
from notesphere.schemas.content import BookCreate, BookOut, ResourceCreate, ResourceOut
from notesphere.schemas.library import (
    CategoryCreate, CategoryOut, ResourceTypeCreate, ResourceTypeOut,
    ResourceFileCreate, ResourceFileOut,
)

RECENT_LIMIT = 5
FEATURED_FILES_LIMIT = 3


class DuplicateNameError(ValueError):
    """Ya existe una fila con ese nombre (sin distinguir mayúsculas)."""


def parse_numeric_key(key: str) -> Optional[int]:
    """'3' -> 3; cualquier otra cosa -> None (se trata como nombre/slug)."""
    k = (key or "").strip()
    return int(k) if k.isdigit() else None


class CatalogRepository(ABC):

    # ---------- Users ----------
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRecord]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRecord]: ...

    @abstractmethod
    def create_user(self, username: str, password_hash: str, is_admin: bool = False) -> UserRecord: ...

    # ---------- Classes ----------
    @abstractmethod
    def get_all_classes(self) -> List[ClassOut]: ...

    @abstractmethod
    def get_class(self, class_id: int) -> Optional[ClassOut]: ...

    @abstractmethod
    def get_class_by_name(self, name: str) -> Optional[ClassOut]: ...

    @abstractmethod
    def create_class(self, data: ClassCreate) -> ClassOut:
        """Lanza DuplicateNameError si el nombre ya existe (JEE == jee)."""

    def resolve_class(self, key: str) -> Optional[ClassOut]:
        """Id numérico primero; si no es numérico o no existe, por nombre."""
        class_id = parse_numeric_key(key)
        if class_id is not None:
            cls = self.get_class(class_id)
            if cls:
                return cls
        return self.get_class_by_name(key)

    # ---------- Subjects ----------
    @abstractmethod
    def get_all_subjects(self) -> List[SubjectOut]: ...

    @abstractmethod
    def get_subject(self, subject_id: int) -> Optional[SubjectOut]: ...

    @abstractmethod
    def get_subjects_by_class_id(self, class_id: int) -> List[SubjectOut]: ...

    def get_subjects_by_class_name(self, class_name: str) -> List[SubjectOut]:
        cls = self.get_class_by_name(class_name)
        if not cls:
            return []
        return self.get_subjects_by_class_id(cls.id)

    @abstractmethod
    def get_subject_by_class_and_name(self, class_id: int, name: str) -> Optional[SubjectOut]: ...

    @abstractmethod
    def create_subject(self, data: SubjectCreate) -> SubjectOut: ...

    # ---------- Chapters ----------
    @abstractmethod
    def get_all_chapters(self) -> List[ChapterOut]: ...

    @abstractmethod
    def get_chapter(self, chapter_id: int) -> Optional[ChapterOut]: ...

    @abstractmethod
    def get_chapters_by_subject_id(self, subject_id: int) -> List[ChapterOut]: ...

    @abstractmethod
    def create_chapter(self, data: ChapterCreate) -> ChapterOut: ...

    @abstractmethod
    def delete_chapter(self, chapter_id: int) -> bool: ...

    # ---------- Topics ----------
    @abstractmethod
    def get_topic(self, topic_id: int) -> Optional[TopicOut]: ...

    @abstractmethod
    def get_topics_by_chapter_id(self, chapter_id: int) -> List[TopicOut]: ...

    @abstractmethod
    def create_topic(self, data: TopicCreate) -> TopicOut: ...

    # ---------- Books ----------
    @abstractmethod
    def get_books(self, class_id: Optional[int] = None, subject_id: Optional[int] = None) -> List[BookOut]: ...

    @abstractmethod
    def get_book(self, book_id: int) -> Optional[BookOut]: ...

    @abstractmethod
    def get_featured_books(self) -> List[BookOut]: ...

    @abstractmethod
    def get_recent_books(self, limit: int = RECENT_LIMIT) -> List[BookOut]: ...

    @abstractmethod
    def create_book(self, data: BookCreate) -> BookOut: ...

    @abstractmethod
    def delete_book(self, book_id: int) -> bool: ...

    @abstractmethod
    def increment_book_downloads(self, book_id: int) -> Optional[BookOut]: ...

    # ---------- Resources ----------
    @abstractmethod
    def get_resources(
        self,
        class_id: Optional[int] = None,
        subject_id: Optional[int] = None,
        type: Optional[str] = None,
    ) -> List[ResourceOut]: ...

    @abstractmethod
    def get_resource(self, resource_id: int) -> Optional[ResourceOut]: ...

    @abstractmethod
    def create_resource(self, data: ResourceCreate) -> ResourceOut: ...

    @abstractmethod
    def delete_resource(self, resource_id: int) -> bool: ...

    @abstractmethod
    def increment_resource_count(self, resource_id: int) -> Optional[ResourceOut]: ...

    # ---------- Categories / resource types ----------
    @abstractmethod
    def get_all_categories(self) -> List[CategoryOut]: ...

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[CategoryOut]: ...

    @abstractmethod
    def get_category_by_slug(self, slug: str) -> Optional[CategoryOut]: ...

    @abstractmethod
    def create_category(self, data: CategoryCreate) -> CategoryOut: ...

    def resolve_category(self, key: str) -> Optional[CategoryOut]:
        category_id = parse_numeric_key(key)
        if category_id is not None:
            category = self.get_category(category_id)
            if category:
                return category
        return self.get_category_by_slug(key)

    @abstractmethod
    def get_all_resource_types(self) -> List[ResourceTypeOut]: ...

    @abstractmethod
    def get_resource_type(self, type_id: int) -> Optional[ResourceTypeOut]: ...

    @abstractmethod
    def get_resource_type_by_slug(self, slug: str) -> Optional[ResourceTypeOut]: ...

    @abstractmethod
    def create_resource_type(self, data: ResourceTypeCreate) -> ResourceTypeOut: ...

    def resolve_resource_type(self, key: str) -> Optional[ResourceTypeOut]:
        type_id = parse_numeric_key(key)
        if type_id is not None:
            rtype = self.get_resource_type(type_id)
            if rtype:
                return rtype
        return self.get_resource_type_by_slug(key)

    # ---------- Resource files (catálogo plano por categoría) ----------
    @abstractmethod
    def get_all_resource_files(self) -> List[ResourceFileOut]: ...

    @abstractmethod
    def get_resource_file(self, file_id: int) -> Optional[ResourceFileOut]: ...

    @abstractmethod
    def get_resource_files_by_category(self, category_id: int) -> List[ResourceFileOut]: ...

    @abstractmethod
    def get_featured_resource_files(self, limit: int = FEATURED_FILES_LIMIT) -> List[ResourceFileOut]: ...

    @abstractmethod
    def get_recent_resource_files(self, limit: int = RECENT_LIMIT) -> List[ResourceFileOut]: ...

    @abstractmethod
    def create_resource_file(self, data: ResourceFileCreate) -> ResourceFileOut: ...

    @abstractmethod
    def delete_resource_file(self, file_id: int) -> bool: ...
