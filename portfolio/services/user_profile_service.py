"""사용자 프로필 서비스 — 대시보드 회원가입 및 로그인 비즈니스 로직.

User Profile Service — Business logic for dashboard registration and login.
"""

import logging
from typing import Literal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.user import User
from portfolio.repositories.user_repository import user_repository
from portfolio.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from portfolio.utils.exceptions import BadRequestError
from portfolio.utils.jwt import create_access_token
from portfolio.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserProfileService:
    """포트폴리오 소유자 계정 관련 비즈니스 로직을 처리하는 서비스.

    Service handling portfolio owner account business logic.
    """

    async def user_profile_exists(
        self,
        db: AsyncSession,
        field: Literal["email", "username"],
        value: str,
    ) -> bool:
        """주어진 이메일 또는 아이디의 사용자가 존재하는지 확인합니다.

        Check whether a user with the given email or username exists.
        Emails are compared case-insensitively.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            field: 검색 필드 ("email" | "username")
            value: 검색 값 (Value to look for)

        Returns:
            bool: 존재 여부 (Whether such a user exists)
        """
        if field == "email":
            return await user_repository.get_by_email(db, value) is not None
        return await user_repository.get_by_username(db, value) is not None

    async def register(
        self,
        db: AsyncSession,
        data: RegisterRequest,
    ) -> RegisterResponse:
        """새 포트폴리오 소유자를 등록합니다.

        Register a new portfolio owner.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Registration request data)

        Returns:
            RegisterResponse: 생성된 사용자 ID와 가입 일시
                              (Created user id and registration date)

        Raises:
            BadRequestError: 이메일 또는 아이디가 이미 사용 중일 때
                             (Email or username already taken)
        """
        logger.info("Registration attempt for username %s", data.username)

        if await self.user_profile_exists(db, "email", data.email):
            logger.warning("Registration rejected: email already taken")
            raise BadRequestError("Email taken. Kindly try with a different email address")

        if await self.user_profile_exists(db, "username", data.username):
            logger.warning("Registration rejected: username %s already taken", data.username)
            raise BadRequestError("Username taken. Kindly try with a different username")

        try:
            user: User = await user_repository.create(
                db,
                {
                    "first_name": data.first_name,
                    "last_name": data.last_name,
                    "username": data.username,
                    "email": data.email.lower(),
                    "password_hash": hash_password(data.password),
                },
            )
        except IntegrityError as e:
            # 동시 가입이 먼저 커밋됨 — A concurrent registration committed first
            await db.rollback()
            logger.warning("Registration for %s lost a race to a concurrent request", data.username)
            if await user_repository.get_by_username(db, data.username) is not None:
                raise BadRequestError("Username taken. Kindly try with a different username") from e
            raise BadRequestError("Email taken. Kindly try with a different email address") from e
        logger.info("User %s registered", user.username)

        return RegisterResponse(
            inserted_id=str(user.id),
            registration_date=user.created_at,
        )

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> LoginResponse:
        """이메일과 비밀번호로 로그인합니다.

        Authenticate with email and password and issue an access token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)

        Returns:
            LoginResponse: JWT 토큰과 사용자 아이디 (JWT token and username)

        Raises:
            BadRequestError: 이메일 또는 비밀번호가 틀렸을 때
                             (Unknown email or wrong password)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None:
            logger.warning("Login failed: unknown email")
            raise BadRequestError("Incorrect email")

        if not verify_password(data.password, user.password_hash):
            logger.warning("Login failed: incorrect password for %s", user.username)
            raise BadRequestError("Incorrect password")

        token: str = create_access_token({"sub": str(user.id), "email": user.email})
        logger.info("User %s logged in", user.username)
        return LoginResponse(token=token, username=user.username)


# 싱글턴 인스턴스 — Singleton instance
user_profile_service: UserProfileService = UserProfileService()
