from datetime import datetime, timedelta, timezone
from jose import jwt
from passlib.context import CryptContext

from notesphere.core.config import SECRET_KEY, ACCESS_TOKEN_EXPIRE_MINUTES

ALGORITHM = "HS256"

# Solo se guardan y comparan hashes bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Token de sesión; `sub` es el username (el usuario se recarga en cada request)."""
    now = datetime.now(tz=timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    return jwt.encode({"sub": subject, "iat": now, "exp": expire}, SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> dict:
    # JWTError (firma, formato, expirado) se propaga; deps lo traduce a 401
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
