"""비밀번호 해싱, 검증 및 정책 유틸리티 모듈.

Password hashing, verification and strength policy.
Passwords are never stored in plain text — always hashed with bcrypt.
"""

import re

import bcrypt

# 비밀번호 정책 — 8자 이상, 숫자와 대문자 각각 1개 이상
_MIN_LENGTH: int = 8
_DIGIT = re.compile(r"\d")
_UPPER = re.compile(r"[A-Z]")


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password using bcrypt with a random salt.
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a bcrypt hash.

    Returns:
        bool: 일치하면 True (True if password matches hash)
    """
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )


def is_strong_password(password: str) -> bool:
    """비밀번호가 정책을 만족하는지 확인합니다.

    Check the password policy: at least 8 characters, one digit and one
    uppercase letter.
    """
    return (
        len(password) >= _MIN_LENGTH
        and _DIGIT.search(password) is not None
        and _UPPER.search(password) is not None
    )
