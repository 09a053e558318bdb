from datetime import datetime
from pydantic import Field
from notesphere.schemas.common import CamelModel

class UserRecord(CamelModel):
    """Fila completa de usuario; password es el hash. No se devuelve al cliente."""
    id: int
    username: str
    password: str
    is_admin: bool = False
    created_at: datetime

class UserOut(CamelModel):
    id: int
    username: str
    is_admin: bool

class UserRegister(CamelModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=6, max_length=72)

class UserLogin(CamelModel):
    username: str
    password: str

class LoginOut(UserOut):
    access_token: str
    token_type: str = "bearer"
