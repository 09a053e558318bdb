"""
Almacenamiento de PDFs subidos.

Carpeta plana UPLOADS_DIR, nombre generado `<campo>-<epoch ms>-<aleatorio><ext>`
y ruta pública `/uploads/<nombre>`.
"""
import logging
import os
import random
import time
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

log = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
CHUNK_SIZE = 1024 * 1024


class UploadRejected(Exception):
    """Archivo ausente, de tipo no permitido o demasiado grande."""


@dataclass
class StoredFile:
    file_name: str
    size: int

    @property
    def file_path(self) -> str:
        return f"/uploads/{self.file_name}"

    @property
    def human_size(self) -> str:
        return human_size(self.size)


def human_size(num_bytes: int) -> str:
    if num_bytes > 1024 * 1024:
        return f"{num_bytes / (1024 * 1024):.1f} MB"
    return f"{num_bytes / 1024:.1f} KB"


def generate_filename(field: str, original_name: str | None) -> str:
    ext = os.path.splitext(original_name or "")[1].lower()
    return f"{field}-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


def upload_path(uploads_dir: Path, file_name: str) -> Path:
    # solo el nombre: nada de rutas relativas tipo ../
    return uploads_dir / Path(file_name).name


def save_pdf(upload: UploadFile | None, uploads_dir: Path, field: str, max_size: int) -> StoredFile:
    if upload is None or not upload.filename:
        raise UploadRejected("No file uploaded")
    if upload.content_type != PDF_MIME:
        raise UploadRejected("Only PDF files are allowed")

    uploads_dir.mkdir(parents=True, exist_ok=True)
    name = generate_filename(field, upload.filename)
    dest = upload_path(uploads_dir, name)

    size = 0
    try:
        with open(dest, "wb") as out:
            while True:
                chunk = upload.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_size:
                    raise UploadRejected(f"File too large (max {human_size(max_size)})")
                out.write(chunk)
    except BaseException:
        dest.unlink(missing_ok=True)
        raise

    log.info("stored upload %s (%s bytes)", name, size)
    return StoredFile(file_name=name, size=size)


def remove_upload(uploads_dir: Path, file_name: str) -> bool:
    """Borra el archivo si existe; que no exista no es un error."""
    path = upload_path(uploads_dir, file_name)
    if path.exists():
        path.unlink()
        return True
    return False
