"""비즈니스 로직 서비스 패키지"""

from storefront.services.admin_service import AdminService
from storefront.services.analytics_service import AnalyticsService
from storefront.services.auth_service import AuthService
from storefront.services.cart_service import CartService
from storefront.services.category_service import CategoryService
from storefront.services.inventory_service import InventoryService
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService
from storefront.services.review_service import ReviewService
from storefront.services.search_service import ProductSearchService

__all__ = [
    "AdminService",
    "AnalyticsService",
    "AuthService",
    "CartService",
    "CategoryService",
    "InventoryService",
    "OrderService",
    "ProductService",
    "ProductSearchService",
    "ReviewService",
]
