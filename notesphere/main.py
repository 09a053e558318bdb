import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from notesphere.core.config import (
    STORAGE_BACKEND, DATABASE_URL, UPLOADS_DIR, TEMP_DIR, MAX_UPLOAD_SIZE,
    SEED_ON_STARTUP, LOG_LEVEL, cors_origins,
)
from notesphere.core.errors import register_exception_handlers
from notesphere.repositories import CatalogRepository, SqlCatalogRepository, build_repository
from notesphere.services.seed import seed_catalog

from notesphere.routers import auth as auth_router
from notesphere.routers import admin as admin_router
from notesphere.routers import classes as classes_router
from notesphere.routers import subjects as subjects_router
from notesphere.routers import chapters as chapters_router
from notesphere.routers import topics as topics_router
from notesphere.routers import books as books_router
from notesphere.routers import resources as resources_router
from notesphere.routers import library as library_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("notesphere")


def create_app(
    repository: CatalogRepository | None = None,
    *,
    uploads_dir: Path | str | None = None,
    temp_dir: Path | str | None = None,
    max_upload_size: int | None = None,
    seed_on_startup: bool | None = None,
) -> FastAPI:
    """
    Construye la app con su repositorio. Los tests pasan su propio
    repositorio y carpetas; en producción todo sale del entorno.
    """
    repo = repository or build_repository(STORAGE_BACKEND, DATABASE_URL)
    seed = SEED_ON_STARTUP if seed_on_startup is None else seed_on_startup

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if isinstance(repo, SqlCatalogRepository):
            repo.create_schema()
        app.state.uploads_dir.mkdir(parents=True, exist_ok=True)
        app.state.temp_dir.mkdir(parents=True, exist_ok=True)
        if seed:
            seed_catalog(repo)
        log.info("NoteSphere ready (backend=%s)", type(repo).__name__)
        yield

    app = FastAPI(title="NoteSphere API", lifespan=lifespan)

    app.state.repository = repo
    app.state.uploads_dir = Path(uploads_dir or UPLOADS_DIR).resolve()
    app.state.temp_dir = Path(temp_dir or TEMP_DIR).resolve()
    app.state.max_upload_size = max_upload_size or MAX_UPLOAD_SIZE

    # ==== CORS ====
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # /uploads -> PDFs subidos por el admin (la carpeta se crea en el arranque)
    app.mount("/uploads", StaticFiles(directory=str(app.state.uploads_dir), check_dir=False), name="uploads")

    # ==== Routers ====
    app.include_router(auth_router.router)
    app.include_router(admin_router.router)
    app.include_router(classes_router.router)
    app.include_router(subjects_router.router)
    app.include_router(chapters_router.router)
    app.include_router(topics_router.router)
    app.include_router(books_router.router)
    app.include_router(resources_router.router)
    app.include_router(library_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
