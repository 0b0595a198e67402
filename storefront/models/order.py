"""
주문, 주문 항목, 배송지 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from storefront.db.database import Base

STATUS_PENDING = "pending"
STATUS_PROCESSING = "processing"
STATUS_SHIPPED = "shipped"
STATUS_DELIVERED = "delivered"

# 주문 처리 상태는 이 순서로만 진행됨
ORDER_STATUSES = (STATUS_PENDING, STATUS_PROCESSING, STATUS_SHIPPED, STATUS_DELIVERED)


class Order(Base):
    """
    체크아웃으로 생성된 주문

    Attributes:
        id: 주문 고유 ID (Primary Key)
        buyer_id: 구매자 (profiles.id Foreign Key)
        status: 주문 항목 중 가장 덜 진행된 상태
        subtotal: 항목별 가격 * 수량 합계
        tax: subtotal에 부과된 세금
        total: subtotal + tax
        created_at: 주문 시간
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    buyer_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=STATUS_PENDING)
    subtotal = Column(Float, nullable=False)
    tax = Column(Float, nullable=False)
    total = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    buyer = relationship("Profile", backref="orders")
    items = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan"
    )
    shipping_address = relationship(
        "ShippingAddress",
        back_populates="order",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, buyer_id={self.buyer_id}, total={self.total})>"


class OrderItem(Base):
    """
    주문의 상품 한 줄

    Attributes:
        id: 항목 고유 ID (Primary Key)
        order_id: 주문 (orders.id Foreign Key)
        product_id: 상품 (products.id Foreign Key)
        quantity: 구매 수량
        price: 주문 시점의 단가
        status: pending | processing | shipped | delivered
        shipped_at: 판매자가 배송 처리한 시간
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default=STATUS_PENDING)
    shipped_at = Column(DateTime, nullable=True)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")

    @property
    def line_total(self) -> float:
        return round(self.price * self.quantity, 2)

    def __repr__(self) -> str:
        return (
            f"<OrderItem(id={self.id}, order_id={self.order_id}, "
            f"product_id={self.product_id}, quantity={self.quantity})>"
        )


class ShippingAddress(Base):
    """
    체크아웃 시 입력한 배송지 (주문당 하나)
    """

    __tablename__ = "shipping_addresses"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), unique=True, nullable=False)
    full_name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    zip_code = Column(String(20), nullable=False)
    country = Column(String(100), nullable=False)

    order = relationship("Order", back_populates="shipping_address")

    def __repr__(self) -> str:
        return f"<ShippingAddress(order_id={self.order_id}, city='{self.city}')>"
