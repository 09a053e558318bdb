import itertools
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from notesphere.repositories.base import (
    CatalogRepository, DuplicateNameError, RECENT_LIMIT, FEATURED_FILES_LIMIT,
)
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

M = TypeVar("M", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class _Table(Generic[M]):
    """Mapa id -> fila con contador propio. Entrega copias, nunca la fila guardada."""

    def __init__(self):
        self._rows: Dict[int, M] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def insert(self, build: Callable[[int], M]) -> M:
        with self._lock:
            row = build(next(self._ids))
            self._rows[row.id] = row
            return row.model_copy(deep=True)

    def get(self, row_id: int) -> Optional[M]:
        with self._lock:
            row = self._rows.get(row_id)
            return row.model_copy(deep=True) if row else None

    def all(self) -> List[M]:
        with self._lock:
            return [r.model_copy(deep=True) for r in self._rows.values()]

    def where(self, pred: Callable[[M], bool]) -> List[M]:
        return [r for r in self.all() if pred(r)]

    def first(self, pred: Callable[[M], bool]) -> Optional[M]:
        return next(iter(self.where(pred)), None)

    def update(self, row_id: int, **changes) -> Optional[M]:
        with self._lock:
            row = self._rows.get(row_id)
            if row is None:
                return None
            row = row.model_copy(update=changes, deep=True)
            self._rows[row_id] = row
            return row.model_copy(deep=True)

    def delete(self, row_id: int) -> bool:
        with self._lock:
            return self._rows.pop(row_id, None) is not None


def _by_order(rows):
    return sorted(rows, key=lambda r: (r.order, r.id))


def _newest_first(rows):
    return sorted(rows, key=lambda r: (r.created_at, r.id), reverse=True)


class MemoryCatalogRepository(CatalogRepository):
    """Catálogo en memoria del proceso; los ids se reinician al arrancar."""

    def __init__(self):
        self.users: _Table[UserRecord] = _Table()
        self.classes: _Table[ClassOut] = _Table()
        self.subjects: _Table[SubjectOut] = _Table()
        self.chapters: _Table[ChapterOut] = _Table()
        self.topics: _Table[TopicOut] = _Table()
        self.books: _Table[BookOut] = _Table()
        self.resources: _Table[ResourceOut] = _Table()
        self.categories: _Table[CategoryOut] = _Table()
        self.resource_types: _Table[ResourceTypeOut] = _Table()
        self.resource_files: _Table[ResourceFileOut] = _Table()

    # ---------- Users ----------
    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_user_by_username(self, username):
        return self.users.first(lambda u: u.username == username)

    def create_user(self, username, password_hash, is_admin=False):
        return self.users.insert(lambda i: UserRecord(
            id=i, username=username, password=password_hash, is_admin=is_admin, created_at=_now(),
        ))

    # ---------- Classes ----------
    def get_all_classes(self):
        return _by_order(self.classes.all())

    def get_class(self, class_id):
        return self.classes.get(class_id)

    def get_class_by_name(self, name):
        wanted = name.lower()
        return self.classes.first(lambda c: c.name.lower() == wanted)

    def create_class(self, data: ClassCreate):
        # comprobar e insertar bajo el mismo lock
        with self.classes._lock:
            if self.get_class_by_name(data.name):
                raise DuplicateNameError(data.name)
            return self.classes.insert(lambda i: ClassOut(id=i, **data.model_dump()))

    # ---------- Subjects ----------
    def get_all_subjects(self):
        return self.subjects.all()

    def get_subject(self, subject_id):
        return self.subjects.get(subject_id)

    def get_subjects_by_class_id(self, class_id):
        return self.subjects.where(lambda s: s.class_id == class_id)

    def get_subject_by_class_and_name(self, class_id, name):
        wanted = name.lower()
        return self.subjects.first(lambda s: s.class_id == class_id and s.name.lower() == wanted)

    def create_subject(self, data: SubjectCreate):
        return self.subjects.insert(lambda i: SubjectOut(id=i, **data.model_dump()))

    # ---------- Chapters ----------
    def get_all_chapters(self):
        return _by_order(self.chapters.all())

    def get_chapter(self, chapter_id):
        return self.chapters.get(chapter_id)

    def get_chapters_by_subject_id(self, subject_id):
        return _by_order(self.chapters.where(lambda c: c.subject_id == subject_id))

    def create_chapter(self, data: ChapterCreate):
        return self.chapters.insert(lambda i: ChapterOut(id=i, **data.model_dump()))

    def delete_chapter(self, chapter_id):
        return self.chapters.delete(chapter_id)

    # ---------- Topics ----------
    def get_topic(self, topic_id):
        return self.topics.get(topic_id)

    def get_topics_by_chapter_id(self, chapter_id):
        return _by_order(self.topics.where(lambda t: t.chapter_id == chapter_id))

    def create_topic(self, data: TopicCreate):
        return self.topics.insert(lambda i: TopicOut(id=i, **data.model_dump()))

    # ---------- Books ----------
    def get_books(self, class_id=None, subject_id=None):
        return self.books.where(lambda b: (class_id is None or b.class_id == class_id)
                                and (subject_id is None or b.subject_id == subject_id))

    def get_book(self, book_id):
        return self.books.get(book_id)

    def get_featured_books(self):
        return self.books.where(lambda b: b.featured)

    def get_recent_books(self, limit=RECENT_LIMIT):
        return _newest_first(self.books.all())[:limit]

    def create_book(self, data: BookCreate):
        return self.books.insert(lambda i: BookOut(
            id=i, download_count=0, created_at=_now(), **data.model_dump(),
        ))

    def delete_book(self, book_id):
        return self.books.delete(book_id)

    def increment_book_downloads(self, book_id):
        with self.books._lock:
            book = self.books.get(book_id)
            if book is None:
                return None
            return self.books.update(book_id, download_count=book.download_count + 1)

    # ---------- Resources ----------
    def get_resources(self, class_id=None, subject_id=None, type=None):
        return self.resources.where(lambda r: (class_id is None or r.class_id == class_id)
                                    and (subject_id is None or r.subject_id == subject_id)
                                    and (type is None or r.type == type))

    def get_resource(self, resource_id):
        return self.resources.get(resource_id)

    def create_resource(self, data: ResourceCreate):
        return self.resources.insert(lambda i: ResourceOut(id=i, created_at=_now(), **data.model_dump()))

    def delete_resource(self, resource_id):
        return self.resources.delete(resource_id)

    def increment_resource_count(self, resource_id):
        with self.resources._lock:
            res = self.resources.get(resource_id)
            if res is None:
                return None
            return self.resources.update(resource_id, count=res.count + 1)

    # ---------- Categories / resource types ----------
    def get_all_categories(self):
        return self.categories.all()

    def get_category(self, category_id):
        return self.categories.get(category_id)

    def get_category_by_slug(self, slug):
        return self.categories.first(lambda c: c.slug == slug)

    def create_category(self, data: CategoryCreate):
        return self.categories.insert(lambda i: CategoryOut(id=i, **data.model_dump()))

    def get_all_resource_types(self):
        return self.resource_types.all()

    def get_resource_type(self, type_id):
        return self.resource_types.get(type_id)

    def get_resource_type_by_slug(self, slug):
        return self.resource_types.first(lambda t: t.slug == slug)

    def create_resource_type(self, data: ResourceTypeCreate):
        return self.resource_types.insert(lambda i: ResourceTypeOut(id=i, **data.model_dump()))

    # ---------- Resource files ----------
    def get_all_resource_files(self):
        return self.resource_files.all()

    def get_resource_file(self, file_id):
        return self.resource_files.get(file_id)

    def get_resource_files_by_category(self, category_id):
        return self.resource_files.where(lambda f: f.category_id == category_id)

    def get_featured_resource_files(self, limit=FEATURED_FILES_LIMIT):
        return self.resource_files.where(lambda f: f.is_featured)[:limit]

    def get_recent_resource_files(self, limit=RECENT_LIMIT):
        return _newest_first(self.resource_files.all())[:limit]

    def create_resource_file(self, data: ResourceFileCreate):
        now = _now()
        return self.resource_files.insert(lambda i: ResourceFileOut(
            id=i, created_at=now, updated_at=now, **data.model_dump(),
        ))

    def delete_resource_file(self, file_id):
        return self.resource_files.delete(file_id)
