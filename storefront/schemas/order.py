"""
체크아웃 및 주문 스키마
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

OrderStatus = Literal["pending", "processing", "shipped", "delivered"]


class ShippingAddressRequest(BaseModel):
    """
    체크아웃 배송지

    Example:
        {
            "full_name": "John Doe",
            "address": "12 Samora Machel Ave",
            "city": "Harare",
            "state": "Harare",
            "zip_code": "00263",
            "country": "Zimbabwe"
        }
    """

    full_name: str = Field(..., min_length=2, max_length=100)
    address: str = Field(..., min_length=5, max_length=255)
    city: str = Field(..., min_length=2, max_length=100)
    state: str = Field(..., min_length=2, max_length=100)
    zip_code: str = Field(..., min_length=3, max_length=20)
    country: str = Field(..., min_length=2, max_length=100)


class CheckoutRequest(BaseModel):
    shipping_address: ShippingAddressRequest


class ShippingAddressResponse(ShippingAddressRequest):
    model_config = ConfigDict(from_attributes=True)


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    quantity: int
    price: float
    status: str
    shipped_at: Optional[datetime] = None


class OrderResponse(BaseModel):
    """
    주문 응답 스키마

    Example:
        {
            "id": 1,
            "buyer_id": 1,
            "status": "pending",
            "subtotal": 89.99,
            "tax": 13.5,
            "total": 103.49,
            "created_at": "2025-01-22T10:30:00Z",
            "items": [...],
            "shipping_address": {...}
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    buyer_id: int
    status: str
    subtotal: float
    tax: float
    total: float
    created_at: datetime
    items: list[OrderItemResponse]
    shipping_address: Optional[ShippingAddressResponse] = None


class PurchasedProduct(BaseModel):
    id: int
    name: str
    image_url: Optional[str] = None
    seller_id: Optional[int] = None


class PurchaseHistoryItem(BaseModel):
    """구매 내역 한 줄"""

    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float
    status: str
    shipped_at: Optional[datetime] = None
    ordered_at: datetime
    product: PurchasedProduct
    reviewed: bool
    can_review: bool


class SellerOrderItem(BaseModel):
    id: int
    product_id: int
    product_name: str
    product_image: Optional[str] = None
    quantity: int
    price: float
    status: str


class SellerOrderResponse(BaseModel):
    """판매자 관점의 주문 (해당 판매자의 항목만 포함)"""

    id: int
    created_at: datetime
    status: str
    total: float
    buyer_name: str
    buyer_address: Optional[str] = None
    buyer_city: Optional[str] = None
    buyer_state: Optional[str] = None
    buyer_zip: Optional[str] = None
    buyer_country: Optional[str] = None
    order_items: list[SellerOrderItem]


class OrderItemStatusRequest(BaseModel):
    status: OrderStatus
