"""인증 라우터 — 회원가입, 로그인.

Auth Router — Signup and signin endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.auth import SigninRequest, SignupRequest, TokenResponse
from app.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/signup", response_model=TokenResponse, status_code=201)
async def signup(
    data: SignupRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """회원가입 — 새 사용자 생성 후 액세스 토큰 발급.

    Register a user and return an access token.
    """
    result: TokenResponse = await auth_service.signup(db, data)
    await db.commit()
    return result


@router.post("/signin", response_model=TokenResponse)
async def signin(
    data: SigninRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """로그인 — 이메일/비밀번호 검증 후 액세스 토큰 발급.

    Sign in with email and password.
    """
    return await auth_service.signin(db, data)
