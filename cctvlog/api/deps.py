# cctvlog/api/deps.py
from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.core.config import settings
from cctvlog.core.security import ADMIN_ROLE, ADMIN_SUBJECT, decode_access_token
from cctvlog.db.session import AsyncSessionLocal
from cctvlog.schemas.auth import TokenPayload

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/login",
    auto_error=False,  # permitimos fluxo opcional em modo dev/teste
)


def _dev_admin() -> TokenPayload:
    """
    Admin fictício usado apenas quando ALLOW_ANONYMOUS_DEV_MODE=True.
    Evita 401 em ambientes de teste sem token configurado.
    """
    return TokenPayload(sub="dev", exp=0, role=ADMIN_ROLE)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


async def get_current_admin(
    token: str | None = Depends(oauth2_scheme),
) -> TokenPayload:
    """
    Exige um token emitido por /auth/login para as escritas no registro
    de devices. Token inválido é sempre 401, mesmo em modo dev.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        if settings.ALLOW_ANONYMOUS_DEV_MODE:
            return _dev_admin()
        raise credentials_exception

    try:
        payload = decode_access_token(token)
        token_data = TokenPayload(
            sub=payload.get("sub"),
            exp=payload.get("exp"),
            role=payload.get("role") or "",
        )
    except (JWTError, PydanticValidationError):
        raise credentials_exception

    if token_data.sub != ADMIN_SUBJECT or token_data.role != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions for this resource",
        )
    return token_data
