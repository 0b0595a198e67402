"""
SQLAlchemy 데이터베이스 모델

모든 모델을 여기서 import해야 Base에 테이블이 등록됩니다.
"""

from storefront.models.profile import Profile
from storefront.models.category import Category
from storefront.models.product import Product
from storefront.models.cart import CartItem
from storefront.models.order import Order, OrderItem, ShippingAddress
from storefront.models.review import Review

__all__ = [
    "Profile",
    "Category",
    "Product",
    "CartItem",
    "Order",
    "OrderItem",
    "ShippingAddress",
    "Review",
]
