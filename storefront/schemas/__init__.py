"""
Pydantic 스키마 모듈
"""

from storefront.schemas.catalog import (
    CategoryResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from storefront.schemas.cart import CartResponse
from storefront.schemas.order import CheckoutRequest, OrderResponse

__all__ = [
    "CategoryResponse",
    "ProductCreateRequest",
    "ProductResponse",
    "ProductUpdateRequest",
    "CartResponse",
    "CheckoutRequest",
    "OrderResponse",
]
