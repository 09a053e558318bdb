import logging

from notesphere.core.config import DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_PASSWORD
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.catalog import ClassCreate, SubjectCreate, ChapterCreate, TopicCreate
from notesphere.schemas.content import BookCreate, ResourceCreate
from notesphere.schemas.library import CategoryCreate, ResourceTypeCreate
from notesphere.security import get_password_hash

log = logging.getLogger(__name__)

CLASSES = [
    # name,   icon,                 description,                                   order
    ("10",    "fa-graduation-cap",  "Class 10 board preparation",                  1),
    ("11",    "fa-graduation-cap",  "Class 11 science stream",                     2),
    ("12",    "fa-graduation-cap",  "Class 12 board preparation",                  3),
    ("JEE",   "fa-award",           "Joint Entrance Examination (Main & Advanced)", 4),
    ("NEET",  "fa-heartbeat",       "National Eligibility cum Entrance Test",      5),
]

SUBJECT_ICONS = {
    "Physics": "fa-atom",
    "Chemistry": "fa-flask",
    "Mathematics": "fa-square-root-alt",
    "Biology": "fa-dna",
}

SUBJECTS_BY_CLASS = {
    "10":   ["Physics", "Chemistry", "Mathematics", "Biology"],
    "11":   ["Physics", "Chemistry", "Mathematics", "Biology"],
    "12":   ["Physics", "Chemistry", "Mathematics", "Biology"],
    "JEE":  ["Physics", "Chemistry", "Mathematics"],
    "NEET": ["Physics", "Chemistry", "Biology"],
}

CATEGORIES = [
    ("class-10", "Class 10",         "Notes, sample papers and solutions for Class 10"),
    ("class-11", "Class 11",         "Study material for the Class 11 science stream"),
    ("class-12", "Class 12",         "Board exam notes and solved papers for Class 12"),
    ("jee",      "JEE Preparation",  "Concept notes and question banks for JEE"),
    ("neet",     "NEET Preparation", "Biology-heavy material for NEET aspirants"),
]

RESOURCE_TYPES = [
    ("textbooks",      "Textbooks",      "Complete textbooks in PDF"),
    ("notes",          "Notes",          "Chapter-wise handwritten and typed notes"),
    ("question-banks", "Question Banks", "Practice questions with answers"),
    ("revision",       "Revision",       "Quick revision sheets and formula lists"),
]

# Demo: todo cuelga de Class 11 / Physics
SAMPLE_BOOKS = [
    dict(title="Physics NCERT Textbook", author="NCERT", format="PDF", page_count=356,
         description="Official NCERT textbook for Class 11 Physics, Part 1.",
         topics=["Mechanics", "Thermodynamics"], ref_number="NCERT-P11",
         featured=True, recommended=True, rating=45),
    dict(title="Concepts of Physics", author="HC Verma", format="PDF", page_count=460,
         description="Volume 1 of the classic concept-first physics text.",
         topics=["Mechanics", "Waves", "Optics"], featured=True, rating=49),
    dict(title="Problems in Physics", author="SS Krotov", format="PDF", page_count=280,
         description="Challenging problem set for competitive exams.",
         topics=["Mechanics", "Electrostatics"], rating=47),
    dict(title="Physics for JEE", author="DC Pandey", format="EPUB", page_count=600,
         description="Topic-wise theory and problems aimed at JEE.",
         topics=["Magnetism", "Current Electricity"], recommended=True, rating=48),
]

SAMPLE_CHAPTERS = [
    # name,                           lessons, practices, status,        order, topics
    ("Chapter 1: Physical World",           4, 2, "completed",   1, ["Scope of Physics", "Fundamental Forces"]),
    ("Chapter 2: Units and Measurements",   6, 3, "in-progress", 2, ["SI Units", "Significant Figures", "Dimensional Analysis"]),
    ("Chapter 3: Motion in a Straight Line", 5, 4, "new",        3, ["Position and Displacement", "Kinematic Equations"]),
    ("Chapter 4: Motion in a Plane",        7, 5, "new",         4, []),
    ("Chapter 5: Laws of Motion",           8, 6, "new",         5, []),
]

SAMPLE_RESOURCES = [
    # title,                    type,         icon,                 count, metadata
    ("Video Lectures",          "video",      "ri-youtube-line",       12, "12 videos • 4h 30m"),
    ("Previous Year Papers",    "paper",      "ri-file-paper-2-line",   8, "8 papers • 2015-2022"),
    ("Virtual Experiments",     "experiment", "ri-flask-line",          6, "6 interactive labs"),
    ("Revision Notes",          "notes",      "ri-file-list-line",     10, "10 notes • PDF"),
]


def seed_catalog(repo: CatalogRepository) -> bool:
    """
    Pobla el catálogo solo si no hay clases. Devuelve True si sembró algo.
    Llamarlo de nuevo no duplica nada.
    """
    if repo.get_all_classes():
        log.info("catalog already populated; seed skipped")
        return False

    if repo.get_user_by_username(DEFAULT_ADMIN_USERNAME) is None:
        repo.create_user(DEFAULT_ADMIN_USERNAME, get_password_hash(DEFAULT_ADMIN_PASSWORD), is_admin=True)

    subjects = {}
    for name, icon, description, order in CLASSES:
        cls = repo.create_class(ClassCreate(name=name, icon=icon, description=description, order=order))
        for subject_name in SUBJECTS_BY_CLASS[name]:
            subjects[(name, subject_name)] = repo.create_subject(SubjectCreate(
                name=subject_name,
                class_id=cls.id,
                description=f"{subject_name} for {'Class ' + name if name.isdigit() else name}",
                icon=SUBJECT_ICONS[subject_name],
            ))

    for slug, name, description in CATEGORIES:
        repo.create_category(CategoryCreate(slug=slug, name=name, description=description))
    for slug, name, description in RESOURCE_TYPES:
        repo.create_resource_type(ResourceTypeCreate(slug=slug, name=name, description=description))

    physics = subjects[("11", "Physics")]
    for book in SAMPLE_BOOKS:
        repo.create_book(BookCreate(file_url="", subject_id=physics.id, class_id=physics.class_id, **book))

    for name, lessons, practices, status, order, topic_names in SAMPLE_CHAPTERS:
        chapter = repo.create_chapter(ChapterCreate(
            name=name, subject_id=physics.id, lessons=lessons,
            practices=practices, status=status, order=order,
        ))
        for i, topic_name in enumerate(topic_names, 1):
            repo.create_topic(TopicCreate(name=topic_name, chapter_id=chapter.id, order=i))

    for title, kind, icon, count, metadata in SAMPLE_RESOURCES:
        repo.create_resource(ResourceCreate(
            title=title, type=kind, icon=icon, count=count, metadata=metadata,
            subject_id=physics.id, class_id=physics.class_id,
        ))

    log.info("catalog seeded: %d classes, %d subjects, %d books",
             len(CLASSES), len(subjects), len(SAMPLE_BOOKS))
    return True
