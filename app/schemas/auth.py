"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers signup, signin and token issuance.
"""

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """회원가입 요청 스키마.

    Signup request schema.

    Attributes:
        email: 로그인 이메일 (Login email, unique)
        password: 비밀번호 (Plain text, will be bcrypt-hashed on server)
        nickname: 닉네임 (Display name)
        user_role: 역할 (Role tag, "USER" or "ADMIN", case-insensitive)
    """

    email: str = Field(min_length=3, max_length=255)  # 로그인 이메일 (Login email)
    password: str = Field(min_length=1)  # 비밀번호 — 평문, 서버에서 bcrypt 해싱
    nickname: str = Field(min_length=1, max_length=100)  # 닉네임 (Display name)
    user_role: str = "USER"  # 역할 — "USER"|"ADMIN"


class SigninRequest(BaseModel):
    """로그인 요청 스키마.

    Signin request schema.
    """

    email: str  # 로그인 이메일 (Login email)
    password: str  # 비밀번호 — 평문, 서버에서 bcrypt 해시와 비교


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    JWT token issuance response schema.

    Attributes:
        access_token: JWT 액세스 토큰 (Access token)
        token_type: 토큰 유형 (Always "bearer" for Authorization header)
    """

    access_token: str
    token_type: str = "bearer"
