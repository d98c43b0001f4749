"""FastAPI 의존성 주입 모듈 — 대시보드 인증.

FastAPI dependency injection module — Dashboard authentication.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드로 DB에서 사용자를 조회
       (User is fetched from DB using payload "sub" field)
"""

from typing import Annotated
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.repositories.user_repository import user_repository
from portfolio.utils.exceptions import UnauthorizedError
from portfolio.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — 헤더가 없으면 401 (Missing header yields 401 via our own check)
security: HTTPBearer = HTTPBearer(auto_error=False)

INVALID_TOKEN_MESSAGE: str = "Invalid or expired token"


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the JWT from the Authorization header and return the owner.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        User: 인증된 사용자 ORM 인스턴스 (Authenticated user ORM instance)

    Raises:
        UnauthorizedError: 토큰이 없거나 유효하지 않거나 사용자가 없을 때
                           (Missing or invalid token, or unknown user)
    """
    if credentials is None:
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
    try:
        payload: dict = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
        user_id: UUID = UUID(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

    user: User | None = await user_repository.get_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
    return user
