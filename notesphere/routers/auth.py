from fastapi import APIRouter, Depends, HTTPException, status
from notesphere.deps import get_repository, get_current_user
from notesphere.repositories.base import CatalogRepository
from notesphere.schemas.user import UserRecord, UserRegister, UserLogin, UserOut, LoginOut
from notesphere.security import get_password_hash, verify_password, create_access_token

router = APIRouter(tags=["auth"])

@router.post("/auth/register", response_model=UserOut, status_code=201)
def register(payload: UserRegister, repo: CatalogRepository = Depends(get_repository)):
    if repo.get_user_by_username(payload.username):
        raise HTTPException(status_code=409, detail="Username already taken")
    # siempre usuario normal; los admins salen del seed
    return repo.create_user(payload.username, get_password_hash(payload.password), is_admin=False)

@router.post("/admin/login", response_model=LoginOut)
def login(payload: UserLogin, repo: CatalogRepository = Depends(get_repository)):
    user = repo.get_user_by_username(payload.username)
    if not user or not verify_password(payload.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail="Invalid username or password")
    return LoginOut(
        id=user.id,
        username=user.username,
        is_admin=user.is_admin,
        access_token=create_access_token(subject=user.username),
    )

@router.get("/admin/me", response_model=UserOut)
def read_me(current_user: UserRecord = Depends(get_current_user)):
    return current_user
