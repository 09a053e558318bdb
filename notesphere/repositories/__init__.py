from notesphere.repositories.base import CatalogRepository, DuplicateNameError
from notesphere.repositories.memory import MemoryCatalogRepository
from notesphere.repositories.sql import SqlCatalogRepository
from notesphere.db import build_engine


def build_repository(backend: str, database_url: str) -> CatalogRepository:
    """Se elige una vez al arrancar: 'memory' o 'sql'. Nunca se mezclan."""
    if backend == "memory":
        return MemoryCatalogRepository()
    if backend == "sql":
        return SqlCatalogRepository(build_engine(database_url))
    raise ValueError(f"STORAGE_BACKEND desconocido: {backend!r} (usa 'memory' o 'sql')")


__all__ = ["CatalogRepository", "DuplicateNameError", "MemoryCatalogRepository", "SqlCatalogRepository", "build_repository"]
