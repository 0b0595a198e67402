"""
상품 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from storefront.db.database import Base


class Product(Base):
    """
    카탈로그 상품

    Attributes:
        id: 상품 고유 ID (Primary Key)
        name: 상품명 (Not Null)
        description: 상품 설명 (Nullable)
        price: 달러 단가 (Not Null)
        stock: 재고 수량 (Not Null), 체크아웃 시 차감
        image_url: 이미지 URL (Nullable)
        category_id: 카테고리 (categories.id Foreign Key, Nullable)
        seller_id: 판매자 (profiles.id Foreign Key, Nullable)
        created_at: 생성 시간 (자동 설정)
        updated_at: 수정 시간 (자동 업데이트)
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    image_url = Column(String(500), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    seller_id = Column(Integer, ForeignKey("profiles.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    category = relationship("Category", backref="products")
    seller = relationship("Profile", backref="products")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"
