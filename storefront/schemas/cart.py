"""
장바구니 스키마
"""

from typing import Optional

from pydantic import BaseModel, Field


class CartAddRequest(BaseModel):
    """
    장바구니 담기 요청

    Example:
        {"product_id": 3, "quantity": 1}
    """

    product_id: int = Field(..., gt=0, examples=[3])
    quantity: int = Field(default=1, gt=0, examples=[1])


class CartQuantityRequest(BaseModel):
    """수량 변경 요청 (1 미만이면 장바구니 변경 없음)"""

    quantity: int = Field(..., examples=[2])


class CartItemResponse(BaseModel):
    product_id: int
    name: str
    price: float
    image_url: Optional[str] = None
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    """
    장바구니 내용과 합계

    Example:
        {
            "items": [...],
            "item_count": 3,
            "subtotal": 149.98,
            "tax": 22.5,
            "total": 172.48
        }
    """

    items: list[CartItemResponse]
    item_count: int = Field(..., description="장바구니 전체 수량")
    subtotal: float
    tax: float
    total: float
