from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.user import UserRecord
from notesphere.security import decode_access_token

# auto_error=False: el 401 lo decide get_current_user con su propio mensaje
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/admin/login", auto_error=False)

def get_repository(request: Request) -> CatalogRepository:
    """Repositorio construido en create_app; vive lo que vive el proceso."""
    return request.app.state.repository

def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    repo: CatalogRepository = Depends(get_repository),
) -> UserRecord:
    cred_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise cred_exc
    try:
        payload = decode_access_token(token)
        username: str | None = payload.get("sub")
        if username is None:
            raise cred_exc
    except JWTError:
        raise cred_exc
    # se recarga en cada request: is_admin nunca se cachea aquí
    user = repo.get_user_by_username(username)
    if user is None:
        raise cred_exc
    return user

def require_admin(user: UserRecord = Depends(get_current_user)) -> UserRecord:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required")
    return user
