"""
인증 및 프로필 스키마

API 요청/응답 모델을 정의합니다.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegisterRequest(BaseModel):
    """
    회원 가입 요청 스키마

    Example:
        {
            "name": "Jane Smith",
            "email": "jane@example.com",
            "password": "securePass123",
            "role": "seller"
        }
    """

    name: str = Field(
        ..., min_length=2, max_length=100, description="표시 이름 (2-100자)", examples=["Jane Smith"]
    )
    email: EmailStr = Field(..., description="로그인 이메일", examples=["jane@example.com"])
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="비밀번호 (6자 이상)",
        examples=["securePass123"],
    )
    role: Literal["customer", "seller"] = Field(
        default="customer", description="계정 유형"
    )


class UserLoginRequest(BaseModel):
    """
    로그인 요청 스키마

    Example:
        {
            "email": "jane@example.com",
            "password": "securePass123"
        }
    """

    email: EmailStr = Field(..., description="로그인 이메일", examples=["jane@example.com"])
    password: str = Field(..., description="비밀번호", examples=["securePass123"])


class TokenResponse(BaseModel):
    """
    JWT 토큰 응답 스키마

    Example:
        {
            "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            "token_type": "bearer"
        }
    """

    access_token: str = Field(..., description="JWT 액세스 토큰")
    token_type: str = Field(default="bearer", description="토큰 타입")


class ProfileUpdateRequest(BaseModel):
    """프로필 수정 요청 스키마"""

    name: str = Field(..., min_length=2, max_length=100, description="표시 이름")
    email: EmailStr = Field(..., description="로그인 이메일")


class UserResponse(BaseModel):
    """
    사용자 정보 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Jane Smith",
            "email": "jane@example.com",
            "role": "seller",
            "created_at": "2025-01-22T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="사용자 ID")
    name: str = Field(..., description="표시 이름")
    email: str = Field(..., description="로그인 이메일")
    role: str = Field(..., description="customer | seller | admin")
    created_at: datetime = Field(..., description="가입 시간")
