"""
인증 서비스

회원가입, 로그인, 토큰 기반 프로필 조회, 프로필 수정
"""

import jwt
from sqlalchemy.orm import Session

from storefront.core.config import Settings
from storefront.core.security import hash_password, verify_password, verify_access_token
from storefront.core.exceptions import (
    UserAlreadyExistsException,
    InvalidCredentialsException,
    UserNotFoundException,
)
from storefront.models.profile import Profile, ROLE_CUSTOMER


class AuthService:
    """인증 관련 비즈니스 로직"""

    @staticmethod
    def register_user(
        name: str, email: str, password: str, db: Session, role: str = ROLE_CUSTOMER
    ) -> Profile:
        """
        새 프로필을 등록합니다.

        Args:
            name: 표시 이름
            email: 로그인 이메일 (소문자로 저장)
            password: 평문 비밀번호
            db: 데이터베이스 세션
            role: customer 또는 seller

        Returns:
            Profile: 생성된 프로필

        Raises:
            UserAlreadyExistsException: 이미 가입된 이메일인 경우

        Example:
            >>> user = AuthService.register_user("Jane", "jane@example.com", "secret123", db)
            >>> user.role
            'customer'
        """
        email = email.lower()
        existing = db.query(Profile).filter(Profile.email == email).first()
        if existing:
            raise UserAlreadyExistsException(email)

        profile = Profile(
            name=name,
            email=email,
            hashed_password=hash_password(password),
            role=role,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)

        return profile

    @staticmethod
    def authenticate_user(email: str, password: str, db: Session) -> Profile | None:
        """
        이메일과 비밀번호를 확인합니다.

        Args:
            email: 로그인 이메일
            password: 평문 비밀번호
            db: 데이터베이스 세션

        Returns:
            Profile | None: 인증 성공 시 프로필, 실패 시 None
        """
        user: Profile | None = (
            db.query(Profile).filter(Profile.email == email.lower()).first()
        )
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    @staticmethod
    def get_current_user(token: str, db: Session, settings: Settings) -> Profile:
        """
        JWT 토큰으로 프로필을 조회합니다.

        Args:
            token: JWT 액세스 토큰
            db: 데이터베이스 세션
            settings: 애플리케이션 설정

        Returns:
            Profile: 인증된 프로필

        Raises:
            InvalidCredentialsException: 토큰이 유효하지 않거나 만료된 경우
            UserNotFoundException: 프로필이 더 이상 존재하지 않는 경우
        """
        try:
            payload = verify_access_token(token, settings)
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialsException("Token has expired")
        except jwt.InvalidTokenError:
            raise InvalidCredentialsException("Invalid token")

        user_id = payload.get("user_id")
        if user_id is None:
            raise InvalidCredentialsException("Invalid token payload")

        user = db.query(Profile).filter(Profile.id == user_id).first()
        if user is None:
            raise UserNotFoundException(payload.get("sub", user_id))

        return user

    @staticmethod
    def update_profile(user: Profile, name: str, email: str, db: Session) -> Profile:
        """
        프로필의 이름과 이메일을 변경합니다.

        Raises:
            UserAlreadyExistsException: 새 이메일을 다른 프로필이 사용 중인 경우
        """
        email = email.lower()
        if email != user.email:
            taken = (
                db.query(Profile)
                .filter(Profile.email == email, Profile.id != user.id)
                .first()
            )
            if taken:
                raise UserAlreadyExistsException(email)

        user.name = name
        user.email = email
        db.commit()
        db.refresh(user)

        return user
