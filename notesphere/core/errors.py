import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger("notesphere.errors")

_LOCATIONS = {"body", "query", "path", "header", "cookie"}

def format_validation_errors(errors) -> str:
    """[{'loc': ('body', 'rating'), 'msg': '...'}] -> 'rating: ...'"""
    parts = []
    for err in errors:
        loc = [str(x) for x in err.get("loc", ()) if str(x) not in _LOCATIONS]
        msg = err.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"

def register_exception_handlers(app: FastAPI) -> None:
    # Entrada inválida (body, query o path) -> 400 con el mensaje de validación
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": format_validation_errors(exc.errors())})

    # Cualquier otra cosa -> 500 genérico; el detalle solo va al log
    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
