"""
사용자 프로필 모델

스토어 사용자의 계정과 역할을 저장합니다.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from storefront.db.database import Base

ROLE_CUSTOMER = "customer"
ROLE_SELLER = "seller"
ROLE_ADMIN = "admin"

ROLES = (ROLE_CUSTOMER, ROLE_SELLER, ROLE_ADMIN)


class Profile(Base):
    """
    사용자 프로필

    Attributes:
        id: 사용자 고유 ID (Primary Key)
        name: 표시 이름 (Not Null)
        email: 로그인 이메일 (Unique, Not Null)
        hashed_password: bcrypt 해시 비밀번호 (Not Null)
        role: customer | seller | admin
        created_at: 생성 시간 (자동 설정)
        updated_at: 수정 시간 (자동 업데이트)
    """

    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_CUSTOMER, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, email='{self.email}', role='{self.role}')>"

    def __str__(self) -> str:
        return f"Profile: {self.name}"
