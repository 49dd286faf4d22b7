# cctvlog/api/routes/auth.py
import logging
from datetime import timedelta

from fastapi import APIRouter, HTTPException, status

from cctvlog.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    ADMIN_ROLE,
    ADMIN_SUBJECT,
    authenticate_admin,
    create_access_token,
)
from cctvlog.schemas.auth import LoginRequest, Token

router = APIRouter()
logger = logging.getLogger("cctvlog.api.auth")


@router.post("/login", response_model=Token)
async def login(data: LoginRequest) -> Token:
    """
    Troca a senha de admin por um JWT de curta duração.
    A senha nunca sai do servidor nem é comparada em texto puro.
    """
    if not authenticate_admin(data.password):
        logger.info("[auth] tentativa de login de admin recusada")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid password",
        )

    token_str = create_access_token(
        subject=ADMIN_SUBJECT,
        role=ADMIN_ROLE,
        expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Token(access_token=token_str, token_type="bearer")
