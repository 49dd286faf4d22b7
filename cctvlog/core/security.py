# cctvlog/core/security.py
import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional, Union
from uuid import uuid4

from jose import jwt
from passlib.context import CryptContext

from cctvlog.core.config import settings

logger = logging.getLogger("cctvlog.security")

SECRET_KEY = settings.JWT_SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES

ADMIN_SUBJECT = "admin"
ADMIN_ROLE = "ADMIN"

# Evita subir com a chave padrão em produção
if SECRET_KEY == "change-me-in-production":
    logger.warning(
        "JWT_SECRET_KEY está usando o valor padrão. Defina JWT_SECRET_KEY em produção."
    )

pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


@lru_cache(maxsize=8)
def _hash_plain_admin_password(password: str) -> str:
    return get_password_hash(password)


def get_admin_password_hash() -> Optional[str]:
    """
    Hash da credencial de admin.

    ADMIN_PASSWORD_HASH tem prioridade; ADMIN_PASSWORD (texto puro no .env)
    é hasheada em memória no primeiro uso e nunca é comparada diretamente.
    """
    if settings.ADMIN_PASSWORD_HASH:
        return settings.ADMIN_PASSWORD_HASH
    if settings.ADMIN_PASSWORD:
        return _hash_plain_admin_password(settings.ADMIN_PASSWORD)
    return None


def authenticate_admin(password: str) -> bool:
    hashed = get_admin_password_hash()
    if hashed is None:
        logger.warning("Nenhuma credencial de admin configurada; login recusado")
        return False
    return verify_password(password, hashed)


def create_access_token(
    subject: Union[str, int],
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    expire = datetime.now(timezone.utc) + expires_delta
    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "role": role,
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "jti": uuid4().hex,
    }
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Dict[str, Any]:
    """Valida assinatura, expiração, issuer e audience. Levanta JWTError."""
    return jwt.decode(
        token,
        SECRET_KEY,
        algorithms=[ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )
