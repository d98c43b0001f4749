"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers dashboard registration and login.
"""

from datetime import datetime

from pydantic import BaseModel, Field

# 이메일 형식 패턴 — Basic email shape check (local@domain.tld)
EMAIL_PATTERN: str = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
# 사용자 아이디 패턴 — "-"는 LSI 구분자이므로 금지 ("-" is reserved as the LSI separator)
USERNAME_PATTERN: str = r"^[A-Za-z0-9_.]+$"


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Registration request schema for a new portfolio owner.

    Attributes:
        first_name: 이름 (First name, 2-40 chars)
        last_name: 성 (Last name, 2-40 chars)
        username: 공개 아이디 (Public username, 2-40 chars, letters/digits/"_"/".")
        email: 이메일 (Email address)
        password: 비밀번호 (Plain text, at least 8 chars, bcrypt-hashed on server)
    """

    first_name: str = Field(..., min_length=2, max_length=40)
    last_name: str = Field(..., min_length=2, max_length=40)
    username: str = Field(..., min_length=2, max_length=40, pattern=USERNAME_PATTERN)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=8)  # 비밀번호 — 평문, 서버에서 bcrypt 해싱 (Plain text, server hashes with bcrypt)


class RegisterResponse(BaseModel):
    """회원가입 결과 스키마.

    Attributes:
        inserted_id: 생성된 사용자 UUID (Created user identifier)
        registration_date: 가입 일시 (Registration timestamp)
    """

    inserted_id: str
    registration_date: datetime


class RegisterEnvelope(BaseModel):
    """회원가입 응답 래퍼 — POST /register 응답 본문."""

    message: str = "User successfully registered"
    data: RegisterResponse


class LoginRequest(BaseModel):
    """로그인 요청 스키마.

    Attributes:
        email: 이메일 (Login email, matched case-insensitively)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    email: str = Field(..., min_length=1, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """로그인 결과 스키마.

    Attributes:
        token: JWT 액세스 토큰 (JWT access token for the Authorization header)
        username: 로그인한 사용자 아이디 (Authenticated username)
    """

    token: str
    username: str


class LoginEnvelope(BaseModel):
    """로그인 응답 래퍼 — POST /login 응답 본문."""

    message: str = "Login successful"
    data: LoginResponse
