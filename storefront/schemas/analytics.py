"""
판매자 분석 및 관리자 대시보드 스키마
"""

from pydantic import BaseModel, EmailStr, Field


class CategorySales(BaseModel):
    name: str
    sales: float
    products: int


class ProductSales(BaseModel):
    name: str
    sold: int
    revenue: float


class SalesAnalyticsResponse(BaseModel):
    total_revenue: float
    total_items_sold: int
    average_order_value: float
    sales_by_category: list[CategorySales]
    top_products: list[ProductSales]


class RoleCount(BaseModel):
    role: str
    count: int


class OverviewResponse(BaseModel):
    total_users: int
    sellers: int
    customers: int
    admins: int


class SellerRanking(BaseModel):
    seller_id: int
    seller_name: str
    total_orders: int
    total_revenue: float
    total_items_sold: int


class BuyerRanking(BaseModel):
    buyer_id: int
    buyer_name: str
    total_orders: int
    total_spent: float
    total_items_bought: int


class ProductRanking(BaseModel):
    product_id: int
    product_name: str
    category_name: str
    times_sold: int
    total_quantity_sold: int
    total_revenue: float


class CategoryRanking(BaseModel):
    category_id: int
    category_name: str
    total_products: int
    times_sold: int
    total_quantity_sold: int
    total_revenue: float


class RankingsResponse(BaseModel):
    sellers: list[SellerRanking]
    buyers: list[BuyerRanking]
    products: list[ProductRanking]
    categories: list[CategoryRanking]


class PromoteAdminRequest(BaseModel):
    email: EmailStr = Field(..., examples=["user@example.com"])
