import logging
import re
from pathlib import Path
from typing import Iterator
from urllib.parse import quote
from uuid import uuid4

from fastapi.responses import FileResponse, StreamingResponse

log = logging.getLogger(__name__)

STREAM_CHUNK = 64 * 1024


def download_name_for(title: str, ext: str = ".txt") -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (title or "").lower()).strip("-")
    return f"{slug or 'resource'}{ext}"


def content_disposition(filename: str) -> str:
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


def placeholder_text(title: str, description: str | None, details: dict[str, str]) -> str:
    lines = [
        "NoteSphere Resource",
        "-------------------",
        f"Title: {title}",
        f"Description: {description or ''}",
    ]
    lines += [f"{k}: {v}" for k, v in details.items()]
    lines += [
        "",
        "This is placeholder content generated because no file is stored for this item.",
    ]
    return "\n".join(lines) + "\n"


def stream_temp_file(path: Path, content: str) -> Iterator[bytes]:
    """
    Escribe `content` en `path` al empezar el envío, lo emite por bloques y lo borra
    al final. Si la respuesta nunca se envía no se llega a escribir nada.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        with open(path, "rb") as fh:
            while True:
                chunk = fh.read(STREAM_CHUNK)
                if not chunk:
                    break
                yield chunk
    finally:
        # se ejecuta tanto si el envío termina como si se corta
        path.unlink(missing_ok=True)
        log.debug("removed temp download %s", path.name)


def placeholder_response(temp_dir: Path, download_name: str, content: str) -> StreamingResponse:
    tmp = temp_dir / f"{uuid4().hex}-{Path(download_name).name}"
    return StreamingResponse(
        stream_temp_file(tmp, content),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": content_disposition(download_name)},
    )


def file_response(path: Path, download_name: str, media_type: str = "application/pdf") -> FileResponse:
    # FileResponse con filename ya pone Content-Disposition: attachment
    return FileResponse(path, filename=download_name, media_type=media_type)
