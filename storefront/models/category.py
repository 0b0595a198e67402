"""
카테고리 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from storefront.db.database import Base


class Category(Base):
    """
    상품 카테고리 (Crafts, Jewelry, Clothing 등)

    Attributes:
        id: 카테고리 고유 ID (Primary Key)
        name: 카테고리명 (Unique, Not Null)
        description: 카테고리 설명 (Nullable)
        created_at: 생성 시간
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
