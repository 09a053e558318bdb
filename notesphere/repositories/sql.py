import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select, update, delete, func, inspect as sa_inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from notesphere.db import Base, build_engine, build_session_factory
from notesphere.models import (
    User, SchoolClass, Subject, Chapter, Topic, Book, Resource,
    Category, ResourceType, ResourceFile,
)
from notesphere.repositories.base import (
    CatalogRepository, DuplicateNameError, RECENT_LIMIT, FEATURED_FILES_LIMIT,
)
from notesphere.schemas.user import UserRecord
from notesphere.schemas.catalog import ClassOut, SubjectOut, ChapterOut, TopicOut
from notesphere.schemas.content import BookOut, ResourceOut
from notesphere.schemas.library import CategoryOut, ResourceTypeOut, ResourceFileOut

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_record(schema: Type[M], row) -> Optional[M]:
    """Fila ORM -> modelo Pydantic. SQLite devuelve datetimes naive: se asumen UTC."""
    if row is None:
        return None
    data = {}
    for attr in sa_inspect(row).mapper.column_attrs:
        value = getattr(row, attr.key)
        if isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        data[attr.key] = value
    return schema.model_validate(data)


def _to_records(schema: Type[M], rows) -> list[M]:
    return [_to_record(schema, r) for r in rows]


class SqlCatalogRepository(CatalogRepository):
    """Catálogo sobre SQLAlchemy. Cada operación abre y cierra su propia sesión."""

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or build_engine()
        self._session_factory = build_session_factory(self.engine)

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        log.info("schema ready on %s", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _insert(self, schema: Type[M], row) -> M:
        with self._session() as db:
            db.add(row)
            db.flush()
            db.refresh(row)
            return _to_record(schema, row)

    def _get(self, schema: Type[M], model, row_id: int) -> Optional[M]:
        with self._session() as db:
            return _to_record(schema, db.get(model, row_id))

    def _list(self, schema: Type[M], stmt) -> list[M]:
        with self._session() as db:
            return _to_records(schema, db.execute(stmt).scalars().all())

    def _first(self, schema: Type[M], stmt) -> Optional[M]:
        with self._session() as db:
            return _to_record(schema, db.execute(stmt.limit(1)).scalars().first())

    def _delete(self, model, row_id: int) -> bool:
        with self._session() as db:
            res = db.execute(delete(model).where(model.id == row_id))
            return res.rowcount > 0

    # ---------- Users ----------
    def get_user(self, user_id):
        return self._get(UserRecord, User, user_id)

    def get_user_by_username(self, username):
        return self._first(UserRecord, select(User).where(User.username == username))

    def create_user(self, username, password_hash, is_admin=False):
        return self._insert(UserRecord, User(
            username=username, password=password_hash, is_admin=is_admin, created_at=_now(),
        ))

    # ---------- Classes ----------
    def get_all_classes(self):
        return self._list(ClassOut, select(SchoolClass).order_by(SchoolClass.order, SchoolClass.id))

    def get_class(self, class_id):
        return self._get(ClassOut, SchoolClass, class_id)

    def get_class_by_name(self, name):
        stmt = select(SchoolClass).where(func.lower(SchoolClass.name) == name.lower())
        return self._first(ClassOut, stmt)

    def create_class(self, data):
        try:
            with self._session() as db:
                taken = db.execute(
                    select(SchoolClass.id).where(func.lower(SchoolClass.name) == data.name.lower())
                ).first()
                if taken:
                    raise DuplicateNameError(data.name)
                row = SchoolClass(**data.model_dump())
                db.add(row)
                db.flush()
                db.refresh(row)
                return _to_record(ClassOut, row)
        except IntegrityError:
            # otra petición insertó el mismo nombre entre la consulta y el insert
            raise DuplicateNameError(data.name)

    # ---------- Subjects ----------
    def get_all_subjects(self):
        return self._list(SubjectOut, select(Subject).order_by(Subject.id))

    def get_subject(self, subject_id):
        return self._get(SubjectOut, Subject, subject_id)

    def get_subjects_by_class_id(self, class_id):
        stmt = select(Subject).where(Subject.class_id == class_id).order_by(Subject.id)
        return self._list(SubjectOut, stmt)

    def get_subject_by_class_and_name(self, class_id, name):
        stmt = (
            select(Subject)
            .where(Subject.class_id == class_id, func.lower(Subject.name) == name.lower())
            .order_by(Subject.id)
        )
        return self._first(SubjectOut, stmt)

    def create_subject(self, data):
        return self._insert(SubjectOut, Subject(**data.model_dump()))

    # ---------- Chapters ----------
    def get_all_chapters(self):
        return self._list(ChapterOut, select(Chapter).order_by(Chapter.order, Chapter.id))

    def get_chapter(self, chapter_id):
        return self._get(ChapterOut, Chapter, chapter_id)

    def get_chapters_by_subject_id(self, subject_id):
        stmt = select(Chapter).where(Chapter.subject_id == subject_id).order_by(Chapter.order, Chapter.id)
        return self._list(ChapterOut, stmt)

    def create_chapter(self, data):
        return self._insert(ChapterOut, Chapter(**data.model_dump()))

    def delete_chapter(self, chapter_id):
        return self._delete(Chapter, chapter_id)

    # ---------- Topics ----------
    def get_topic(self, topic_id):
        return self._get(TopicOut, Topic, topic_id)

    def get_topics_by_chapter_id(self, chapter_id):
        stmt = select(Topic).where(Topic.chapter_id == chapter_id).order_by(Topic.order, Topic.id)
        return self._list(TopicOut, stmt)

    def create_topic(self, data):
        return self._insert(TopicOut, Topic(**data.model_dump()))

    # ---------- Books ----------
    def get_books(self, class_id=None, subject_id=None):
        stmt = select(Book)
        if class_id is not None:
            stmt = stmt.where(Book.class_id == class_id)
        if subject_id is not None:
            stmt = stmt.where(Book.subject_id == subject_id)
        return self._list(BookOut, stmt.order_by(Book.id))

    def get_book(self, book_id):
        return self._get(BookOut, Book, book_id)

    def get_featured_books(self):
        return self._list(BookOut, select(Book).where(Book.featured.is_(True)).order_by(Book.id))

    def get_recent_books(self, limit=RECENT_LIMIT):
        stmt = select(Book).order_by(Book.created_at.desc(), Book.id.desc()).limit(limit)
        return self._list(BookOut, stmt)

    def create_book(self, data):
        return self._insert(BookOut, Book(download_count=0, created_at=_now(), **data.model_dump()))

    def delete_book(self, book_id):
        return self._delete(Book, book_id)

    def increment_book_downloads(self, book_id):
        with self._session() as db:
            db.execute(
                update(Book).where(Book.id == book_id)
                .values(download_count=Book.download_count + 1)
            )
            return _to_record(BookOut, db.get(Book, book_id))

    # ---------- Resources ----------
    def get_resources(self, class_id=None, subject_id=None, type=None):
        stmt = select(Resource)
        if class_id is not None:
            stmt = stmt.where(Resource.class_id == class_id)
        if subject_id is not None:
            stmt = stmt.where(Resource.subject_id == subject_id)
        if type is not None:
            stmt = stmt.where(Resource.type == type)
        return self._list(ResourceOut, stmt.order_by(Resource.id))

    def get_resource(self, resource_id):
        return self._get(ResourceOut, Resource, resource_id)

    def create_resource(self, data):
        return self._insert(ResourceOut, Resource(created_at=_now(), **data.model_dump()))

    def delete_resource(self, resource_id):
        return self._delete(Resource, resource_id)

    def increment_resource_count(self, resource_id):
        with self._session() as db:
            db.execute(
                update(Resource).where(Resource.id == resource_id)
                .values(count=Resource.count + 1)
            )
            return _to_record(ResourceOut, db.get(Resource, resource_id))

    # ---------- Categories / resource types ----------
    def get_all_categories(self):
        return self._list(CategoryOut, select(Category).order_by(Category.id))

    def get_category(self, category_id):
        return self._get(CategoryOut, Category, category_id)

    def get_category_by_slug(self, slug):
        return self._first(CategoryOut, select(Category).where(Category.slug == slug))

    def create_category(self, data):
        return self._insert(CategoryOut, Category(**data.model_dump()))

    def get_all_resource_types(self):
        return self._list(ResourceTypeOut, select(ResourceType).order_by(ResourceType.id))

    def get_resource_type(self, type_id):
        return self._get(ResourceTypeOut, ResourceType, type_id)

    def get_resource_type_by_slug(self, slug):
        return self._first(ResourceTypeOut, select(ResourceType).where(ResourceType.slug == slug))

    def create_resource_type(self, data):
        return self._insert(ResourceTypeOut, ResourceType(**data.model_dump()))

    # ---------- Resource files ----------
    def get_all_resource_files(self):
        return self._list(ResourceFileOut, select(ResourceFile).order_by(ResourceFile.id))

    def get_resource_file(self, file_id):
        return self._get(ResourceFileOut, ResourceFile, file_id)

    def get_resource_files_by_category(self, category_id):
        stmt = select(ResourceFile).where(ResourceFile.category_id == category_id).order_by(ResourceFile.id)
        return self._list(ResourceFileOut, stmt)

    def get_featured_resource_files(self, limit=FEATURED_FILES_LIMIT):
        stmt = (
            select(ResourceFile)
            .where(ResourceFile.is_featured.is_(True))
            .order_by(ResourceFile.id)
            .limit(limit)
        )
        return self._list(ResourceFileOut, stmt)

    def get_recent_resource_files(self, limit=RECENT_LIMIT):
        stmt = (
            select(ResourceFile)
            .order_by(ResourceFile.created_at.desc(), ResourceFile.id.desc())
            .limit(limit)
        )
        return self._list(ResourceFileOut, stmt)

    def create_resource_file(self, data):
        now = _now()
        return self._insert(ResourceFileOut, ResourceFile(created_at=now, updated_at=now, **data.model_dump()))

    def delete_resource_file(self, file_id):
        return self._delete(ResourceFile, file_id)
