"""
인증 API 엔드포인트

회원가입, 로그인, 로그인한 프로필 조회 및 수정
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.core.config import Settings, get_settings
from storefront.core.exceptions import UserAlreadyExistsException
from storefront.core.security import create_access_token
from storefront.models.profile import Profile
from storefront.schemas.auth import (
    ProfileUpdateRequest,
    TokenResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
)
from storefront.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
def register(
    user_data: UserRegisterRequest,
    db: Session = Depends(get_db),
):
    """
    구매자 또는 판매자 계정 생성

    Raises:
        HTTPException 409: 이미 가입된 이메일

    Example:
        Request:
        ```json
        {
            "name": "Jane Smith",
            "email": "jane@example.com",
            "password": "securePass123",
            "role": "seller"
        }
        ```

        Response (201):
        ```json
        {
            "id": 1,
            "name": "Jane Smith",
            "email": "jane@example.com",
            "role": "seller",
            "created_at": "2025-01-22T10:30:00Z"
        }
        ```
    """
    try:
        return AuthService.register_user(
            name=user_data.name,
            email=user_data.email,
            password=user_data.password,
            db=db,
            role=user_data.role,
        )

    except UserAlreadyExistsException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    로그인 후 JWT 액세스 토큰 발급

    Raises:
        HTTPException 401: 이메일 또는 비밀번호 불일치
    """
    user = AuthService.authenticate_user(
        email=credentials.email,
        password=credentials.password,
        db=db,
    )

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token_data = {"sub": user.email, "user_id": user.id, "role": user.role}
    access_token = create_access_token(token_data, settings)

    return TokenResponse(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Profile = Depends(get_current_user),
):
    """
    현재 로그인한 프로필 조회

    Raises:
        HTTPException 401: 인증되지 않은 요청
    """
    return current_user


@router.put("/me", response_model=UserResponse)
def update_me(
    profile_data: ProfileUpdateRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """
    로그인한 프로필의 이름과 이메일 변경

    Raises:
        HTTPException 401: 인증되지 않은 요청
        HTTPException 409: 다른 계정이 사용 중인 이메일
    """
    try:
        return AuthService.update_profile(
            current_user, profile_data.name, profile_data.email, db
        )

    except UserAlreadyExistsException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
