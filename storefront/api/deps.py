"""
FastAPI 의존성 정의

DB 세션, 설정, 인증된 사용자, 역할 검사를 제공합니다.
"""

from typing import Optional

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from storefront.core.config import Settings, get_settings
from storefront.core.exceptions import InvalidCredentialsException, UserNotFoundException
from storefront.db.database import get_db
from storefront.models.profile import Profile, ROLE_ADMIN, ROLE_SELLER
from storefront.services.auth_service import AuthService

__all__ = [
    "get_db",
    "get_current_user",
    "require_seller",
    "require_admin",
    "get_llm_transport",
]

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Profile:
    """
    Bearer 토큰에서 로그인한 사용자를 조회합니다.

    Raises:
        HTTPException 401: 토큰이 없거나 유효하지 않거나 만료됨,
            또는 사용자가 더 이상 존재하지 않음

    사용 예:
        @router.get("/protected")
        def protected_route(current_user: Profile = Depends(get_current_user)):
            return {"email": current_user.email}
    """
    try:
        return AuthService.get_current_user(token, db, settings)
    except (InvalidCredentialsException, UserNotFoundException) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_seller(current_user: Profile = Depends(get_current_user)) -> Profile:
    """판매자와 관리자만 허용 (그 외 403)"""
    if current_user.role not in (ROLE_SELLER, ROLE_ADMIN):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Seller account required",
        )
    return current_user


def require_admin(current_user: Profile = Depends(get_current_user)) -> Profile:
    """관리자만 허용 (그 외 403)"""
    if current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def get_llm_transport() -> Optional[httpx.BaseTransport]:
    """
    chat-completion 호출에 사용할 httpx transport

    None이면 기본 네트워크 transport를 사용합니다. 테스트에서는
    httpx.MockTransport로 이 의존성을 교체합니다.
    """
    return None
