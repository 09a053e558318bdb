"""Repository contract, checked against the memory and SQL backends."""

import threading

import pytest

from notesphere.repositories import DuplicateNameError, MemoryCatalogRepository
from notesphere.repositories.base import parse_numeric_key
from notesphere.schemas.catalog import ClassCreate, SubjectCreate, ChapterCreate, TopicCreate
from notesphere.schemas.content import BookCreate, ResourceCreate
from notesphere.schemas.library import CategoryCreate, ResourceTypeCreate, ResourceFileCreate


def book_data(**overrides):
    data = dict(
        title="Concepts of Physics", author="HC Verma", description="Vol 1",
        format="PDF", file_url="", subject_id=1, class_id=1,
        topics=["Optics", "Waves"], rating=40,
    )
    data.update(overrides)
    return BookCreate(**data)


def file_data(**overrides):
    data = dict(
        title="Organic notes", file_size="1.2 MB", file_name="pdfFile-1-1.pdf",
        file_path="/uploads/pdfFile-1-1.pdf", category_id=1, category_name="Class 11",
        type_id=1, type_name="Notes",
    )
    data.update(overrides)
    return ResourceFileCreate(**data)


class TestParseNumericKey:
    """Keys of the dual-key routes."""

    def test_digits_are_ids(self):
        assert parse_numeric_key("3") == 3
        assert parse_numeric_key(" 12 ") == 12

    def test_anything_else_is_a_name(self):
        assert parse_numeric_key("JEE") is None
        assert parse_numeric_key("-1") is None
        assert parse_numeric_key("") is None


class TestCreateAndGet:
    """Created records come back equal and ids are unique per type."""

    def test_ids_positive_and_unique(self, repo):
        ids = [repo.create_book(book_data(title=f"Book {i}")).id for i in range(4)]
        assert all(i > 0 for i in ids)
        assert len(set(ids)) == 4

    def test_counters_are_per_type(self, repo):
        cls = repo.create_class(ClassCreate(name="10", icon="fa-graduation-cap", order=1))
        book = repo.create_book(book_data())
        assert cls.id == 1
        assert book.id == 1

    def test_get_after_create_is_equal(self, repo):
        created = repo.create_book(book_data())
        assert repo.get_book(created.id) == created
        assert created.download_count == 0
        assert created.topics == ["Optics", "Waves"]

        res = repo.create_resource(ResourceCreate(
            title="Video Lectures", type="video", subtitle="12 videos", subject_id=1, class_id=1,
        ))
        assert repo.get_resource(res.id) == res
        assert res.subtitle == "12 videos"

        rfile = repo.create_resource_file(file_data())
        assert repo.get_resource_file(rfile.id) == rfile
        assert rfile.created_at == rfile.updated_at

    def test_unknown_id_is_none(self, repo):
        assert repo.get_book(999) is None
        assert repo.get_class(999) is None
        assert repo.get_topic(999) is None

    def test_no_referential_validation(self, repo):
        chapter = repo.create_chapter(ChapterCreate(name="Orphan", subject_id=42, order=1))
        assert chapter.subject_id == 42
        assert chapter.status == "new"


class TestDelete:
    """Delete then get returns None."""

    def test_delete_then_get(self, repo):
        chapter = repo.create_chapter(ChapterCreate(name="Ch 1", subject_id=1, order=1))
        book = repo.create_book(book_data())
        res = repo.create_resource(ResourceCreate(title="Notes", type="notes", subject_id=1, class_id=1))
        rfile = repo.create_resource_file(file_data())

        assert repo.delete_chapter(chapter.id) is True
        assert repo.delete_book(book.id) is True
        assert repo.delete_resource(res.id) is True
        assert repo.delete_resource_file(rfile.id) is True

        assert repo.get_chapter(chapter.id) is None
        assert repo.get_book(book.id) is None
        assert repo.get_resource(res.id) is None
        assert repo.get_resource_file(rfile.id) is None

    def test_delete_missing_returns_false(self, repo):
        assert repo.delete_book(123) is False
        assert repo.delete_chapter(123) is False


class TestOrderingAndFilters:

    def test_classes_sorted_by_order_then_id(self, repo):
        repo.create_class(ClassCreate(name="NEET", icon="i", order=5))
        repo.create_class(ClassCreate(name="10", icon="i", order=1))
        repo.create_class(ClassCreate(name="JEE", icon="i", order=4))
        assert [c.name for c in repo.get_all_classes()] == ["10", "JEE", "NEET"]

    def test_chapters_and_topics_by_order(self, repo):
        repo.create_chapter(ChapterCreate(name="B", subject_id=1, order=2))
        first = repo.create_chapter(ChapterCreate(name="A", subject_id=1, order=1))
        repo.create_chapter(ChapterCreate(name="Other", subject_id=2, order=0))
        assert [c.name for c in repo.get_chapters_by_subject_id(1)] == ["A", "B"]

        repo.create_topic(TopicCreate(name="t2", chapter_id=first.id, order=2))
        repo.create_topic(TopicCreate(name="t1", chapter_id=first.id, order=1))
        assert [t.name for t in repo.get_topics_by_chapter_id(first.id)] == ["t1", "t2"]

    def test_book_filters_combine(self, repo):
        repo.create_book(book_data(title="a", class_id=1, subject_id=1))
        repo.create_book(book_data(title="b", class_id=1, subject_id=2))
        repo.create_book(book_data(title="c", class_id=2, subject_id=2))

        assert len(repo.get_books()) == 3
        assert [b.title for b in repo.get_books(class_id=1)] == ["a", "b"]
        assert [b.title for b in repo.get_books(subject_id=2)] == ["b", "c"]
        assert [b.title for b in repo.get_books(class_id=1, subject_id=2)] == ["b"]

    def test_resource_filters_combine(self, repo):
        repo.create_resource(ResourceCreate(title="v", type="video", subject_id=1, class_id=1))
        repo.create_resource(ResourceCreate(title="p", type="paper", subject_id=1, class_id=1))
        repo.create_resource(ResourceCreate(title="v2", type="video", subject_id=2, class_id=1))

        assert [r.title for r in repo.get_resources(type="video")] == ["v", "v2"]
        assert [r.title for r in repo.get_resources(subject_id=1, type="video")] == ["v"]
        assert repo.get_resources(class_id=9) == []

    def test_featured_books_is_exactly_the_featured_subset(self, repo):
        for i in range(6):
            repo.create_book(book_data(title=f"b{i}", featured=i % 2 == 0))
        featured = repo.get_featured_books()
        assert [b.title for b in featured] == ["b0", "b2", "b4"]

    def test_recent_books_newest_first_max_five(self, repo):
        for i in range(7):
            repo.create_book(book_data(title=f"b{i}"))
        recent = repo.get_recent_books()
        assert len(recent) == 5
        keys = [(b.created_at, b.id) for b in recent]
        assert keys == sorted(keys, reverse=True)
        assert recent[0].title == "b6"

    def test_featured_files_first_three_by_id(self, repo):
        for i in range(5):
            repo.create_resource_file(file_data(title=f"f{i}", is_featured=True))
        repo.create_resource_file(file_data(title="plain"))
        featured = repo.get_featured_resource_files()
        assert [f.title for f in featured] == ["f0", "f1", "f2"]

    def test_recent_files_newest_first(self, repo):
        for i in range(6):
            repo.create_resource_file(file_data(title=f"f{i}"))
        recent = repo.get_recent_resource_files()
        assert [f.title for f in recent] == ["f5", "f4", "f3", "f2", "f1"]


class TestLookups:

    def test_class_by_id_and_name_agree(self, repo):
        cls = repo.create_class(ClassCreate(name="JEE", icon="fa-award", order=4))
        assert repo.resolve_class(str(cls.id)) == repo.resolve_class("JEE")
        assert repo.get_class_by_name("jee") == cls

    def test_numeric_name_falls_back_when_no_such_id(self, repo):
        cls = repo.create_class(ClassCreate(name="10", icon="i", order=1))
        assert cls.id == 1
        assert repo.resolve_class("10") == cls
        assert repo.resolve_class("nope") is None

    def test_subject_by_class_and_name(self, repo):
        cls = repo.create_class(ClassCreate(name="11", icon="i", order=2))
        physics = repo.create_subject(SubjectCreate(name="Physics", class_id=cls.id))
        repo.create_subject(SubjectCreate(name="Physics", class_id=cls.id + 1))
        assert repo.get_subject_by_class_and_name(cls.id, "physics") == physics
        assert repo.get_subjects_by_class_name("11") == [physics]
        assert repo.get_subjects_by_class_name("12") == []

    def test_category_and_type_by_id_or_slug(self, repo):
        cat = repo.create_category(CategoryCreate(slug="jee", name="JEE Preparation"))
        rtype = repo.create_resource_type(ResourceTypeCreate(slug="notes", name="Notes"))
        assert repo.resolve_category("jee") == cat
        assert repo.resolve_category(str(cat.id)) == cat
        assert repo.resolve_resource_type("notes") == rtype
        assert repo.resolve_resource_type("99") is None

    def test_files_by_category(self, repo):
        repo.create_resource_file(file_data(title="a", category_id=1))
        repo.create_resource_file(file_data(title="b", category_id=2))
        assert [f.title for f in repo.get_resource_files_by_category(2)] == ["b"]

    def test_user_by_username(self, repo):
        user = repo.create_user("ana", "hash", is_admin=False)
        assert repo.get_user_by_username("ana") == user
        assert repo.get_user(user.id) == user
        assert repo.get_user_by_username("ANA") is None


class TestCounters:

    def test_increment_book_downloads(self, repo):
        book = repo.create_book(book_data())
        repo.increment_book_downloads(book.id)
        updated = repo.increment_book_downloads(book.id)
        assert updated.download_count == 2
        assert repo.get_book(book.id).download_count == 2

    def test_increment_resource_count(self, repo):
        res = repo.create_resource(ResourceCreate(title="n", type="notes", count=3, subject_id=1, class_id=1))
        assert repo.increment_resource_count(res.id).count == 4

    def test_increment_missing_is_none(self, repo):
        assert repo.increment_book_downloads(77) is None
        assert repo.increment_resource_count(77) is None

    def test_returned_records_are_copies(self, repo):
        book = repo.create_book(book_data())
        book.topics.append("Hacked")
        assert repo.get_book(book.id).topics == ["Optics", "Waves"]


class TestClassNameUniqueness:
    """Both backends reject a second class with the same name, whatever the case."""

    def test_duplicate_name_rejected(self, repo):
        repo.create_class(ClassCreate(name="JEE", icon="fa-award", order=4))
        with pytest.raises(DuplicateNameError):
            repo.create_class(ClassCreate(name="jee", icon="fa-award", order=5))
        assert [c.name for c in repo.get_all_classes()] == ["JEE"]

    def test_concurrent_creates_keep_one(self):
        repo = MemoryCatalogRepository()
        results = []

        def create():
            try:
                results.append(repo.create_class(ClassCreate(name="NEET", icon="i", order=5)))
            except DuplicateNameError:
                results.append(None)

        threads = [threading.Thread(target=create) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len([r for r in results if r is not None]) == 1
        assert len(repo.get_all_classes()) == 1
