"""
보안 유틸리티

비밀번호 해싱과 JWT 액세스 토큰 발급/검증을 담당합니다.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any
import bcrypt
import jwt

from storefront.core.config import Settings


def hash_password(password: str) -> str:
    """
    bcrypt로 비밀번호 해시를 만듭니다.

    Args:
        password: 평문 비밀번호

    Returns:
        str: salt가 포함된 bcrypt 해시

    Example:
        >>> hashed = hash_password("my_password")
        >>> hashed.startswith("$2b$")
        True
    """
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)

    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    평문 비밀번호가 저장된 bcrypt 해시와 일치하는지 확인합니다.

    Args:
        plain_password: 확인할 비밀번호
        hashed_password: DB에 저장된 해시

    Returns:
        bool: 일치하면 True
    """
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )


def create_access_token(data: Dict[str, Any], settings: Settings) -> str:
    """
    서명된 JWT 액세스 토큰을 발급합니다.

    Args:
        data: 토큰에 담을 클레임 (예: {"sub": "jane@example.com", "user_id": 1, "role": "seller"})
        settings: 애플리케이션 설정 (secret, 알고리즘, 만료 시간)

    Returns:
        str: 인코딩된 JWT

    Example:
        >>> token = create_access_token({"sub": "jane@example.com"}, settings)
        >>> isinstance(token, str)
        True
    """
    payload = data.copy()

    now = datetime.now(timezone.utc)
    payload.update(
        {"iat": now, "exp": now + timedelta(minutes=settings.jwt_expiration_minutes)}
    )

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    JWT 액세스 토큰을 검증하고 클레임을 돌려줍니다.

    Args:
        token: 인코딩된 JWT
        settings: 애플리케이션 설정 (secret, 알고리즘)

    Returns:
        Dict[str, Any]: 토큰 클레임

    Raises:
        jwt.ExpiredSignatureError: 만료된 토큰
        jwt.InvalidTokenError: 형식이 잘못되었거나 서명이 맞지 않는 토큰
    """
    return jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )
