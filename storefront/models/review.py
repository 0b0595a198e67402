"""
리뷰 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from storefront.db.database import Base


class Review(Base):
    """
    주문으로 구매한 상품에 대한 구매자 리뷰

    Attributes:
        id: 리뷰 고유 ID (Primary Key)
        order_id: 주문 (orders.id Foreign Key)
        product_id: 상품 (products.id Foreign Key)
        buyer_id: 작성자 (profiles.id Foreign Key)
        seller_id: 리뷰 시점의 판매자 (Nullable)
        rating: 별점 1..5
        comment: 리뷰 내용 (Nullable)
        created_at: 작성 시간
    """

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("order_id", "product_id", name="uq_reviews_order_product"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    buyer_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    seller_id = Column(Integer, ForeignKey("profiles.id"), nullable=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    buyer = relationship("Profile", foreign_keys=[buyer_id])

    @property
    def buyer_name(self):
        return self.buyer.name if self.buyer else None

    def __repr__(self) -> str:
        return (
            f"<Review(id={self.id}, product_id={self.product_id}, rating={self.rating})>"
        )
