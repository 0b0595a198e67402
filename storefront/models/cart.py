"""
장바구니 항목 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from storefront.db.database import Base


class CartItem(Base):
    """
    사용자 장바구니의 상품 한 줄

    Attributes:
        id: 항목 고유 ID (Primary Key)
        user_id: 장바구니 소유자 (profiles.id Foreign Key)
        product_id: 상품 (products.id Foreign Key)
        quantity: 수량 (1 이상)
        added_at: 처음 담은 시간
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    added_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    product = relationship("Product")

    def __repr__(self) -> str:
        return (
            f"<CartItem(user_id={self.user_id}, product_id={self.product_id}, "
            f"quantity={self.quantity})>"
        )
