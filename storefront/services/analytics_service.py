"""
통계 서비스

판매자 매출 분석과 관리자 대시보드 집계 (역할별 사용자 수,
판매자/구매자/상품/카테고리 순위)
"""

from collections import defaultdict

from sqlalchemy import func
from sqlalchemy.orm import Session

from storefront.models import Category, Order, OrderItem, Product, Profile
from storefront.models.profile import ROLE_ADMIN, ROLE_CUSTOMER, ROLE_SELLER

TOP_PRODUCTS = 5
PRODUCT_LABEL_LENGTH = 20
UNCATEGORIZED = "Uncategorized"


def short_label(name: str, length: int = PRODUCT_LABEL_LENGTH) -> str:
    """
    차트 라벨용으로 상품명을 줄입니다.

    Example:
        >>> short_label("Traditional Shona Sculpture")
        'Traditional Shona Sc...'
    """
    return name[:length] + ("..." if len(name) > length else "")


class AnalyticsService:
    """주문 데이터 읽기 전용 집계"""

    @staticmethod
    def seller_sales(seller: Profile, db: Session) -> dict:
        """
        판매자 상품 기준 매출 분석

        Returns:
            {
                "total_revenue": float,
                "total_items_sold": int,
                "average_order_value": float,   # 매출 / 주문 수
                "sales_by_category": [{"name", "sales", "products"}],  # 매출 > 0 만
                "top_products": [{"name", "sold", "revenue"}]          # 매출 상위 5개
            }
        """
        products = (
            db.query(Product)
            .filter(Product.seller_id == seller.id)
            .order_by(Product.id.asc())
            .all()
        )
        product_ids = [product.id for product in products]

        items = (
            db.query(OrderItem).filter(OrderItem.product_id.in_(product_ids)).all()
            if product_ids
            else []
        )

        sold = defaultdict(int)
        revenue = defaultdict(float)
        for item in items:
            sold[item.product_id] += item.quantity
            revenue[item.product_id] += item.price * item.quantity

        total_revenue = round(sum(revenue.values()), 2)
        total_items_sold = sum(sold.values())
        order_count = len({item.order_id for item in items})

        sales_by_category = []
        for category in db.query(Category).order_by(Category.name.asc()).all():
            category_products = [p for p in products if p.category_id == category.id]
            sales = round(sum(revenue[p.id] for p in category_products), 2)
            if sales > 0:
                sales_by_category.append(
                    {
                        "name": category.name,
                        "sales": sales,
                        "products": len(category_products),
                    }
                )

        product_sales = [
            {
                "name": short_label(product.name),
                "sold": sold[product.id],
                "revenue": round(revenue[product.id], 2),
            }
            for product in products
            if sold[product.id] > 0
        ]
        product_sales.sort(key=lambda entry: entry["revenue"], reverse=True)

        return {
            "total_revenue": total_revenue,
            "total_items_sold": total_items_sold,
            "average_order_value": round(total_revenue / order_count, 2)
            if order_count
            else 0.0,
            "sales_by_category": sales_by_category,
            "top_products": product_sales[:TOP_PRODUCTS],
        }

    @staticmethod
    def user_analytics(db: Session) -> list[dict]:
        """역할별 프로필 수: [{"role": "customer", "count": 12}, ...]"""
        rows = (
            db.query(Profile.role, func.count(Profile.id))
            .group_by(Profile.role)
            .order_by(Profile.role.asc())
            .all()
        )
        return [{"role": role, "count": count} for role, count in rows]

    @staticmethod
    def overview(db: Session) -> dict:
        counts = {entry["role"]: entry["count"] for entry in AnalyticsService.user_analytics(db)}
        return {
            "total_users": sum(counts.values()),
            "sellers": counts.get(ROLE_SELLER, 0),
            "customers": counts.get(ROLE_CUSTOMER, 0),
            "admins": counts.get(ROLE_ADMIN, 0),
        }

    @staticmethod
    def seller_rankings(db: Session, limit: int = 10) -> list[dict]:
        revenue = func.sum(OrderItem.price * OrderItem.quantity)
        rows = (
            db.query(
                Profile.id,
                Profile.name,
                func.count(func.distinct(OrderItem.order_id)),
                revenue,
                func.sum(OrderItem.quantity),
            )
            .join(Product, Product.seller_id == Profile.id)
            .join(OrderItem, OrderItem.product_id == Product.id)
            .group_by(Profile.id, Profile.name)
            .order_by(revenue.desc(), Profile.id.asc())
            .limit(limit)
            .all()
        )
        return [
            {
                "seller_id": seller_id,
                "seller_name": name,
                "total_orders": orders,
                "total_revenue": round(total or 0.0, 2),
                "total_items_sold": int(quantity or 0),
            }
            for seller_id, name, orders, total, quantity in rows
        ]

    @staticmethod
    def buyer_rankings(db: Session, limit: int = 10) -> list[dict]:
        spent = func.sum(OrderItem.price * OrderItem.quantity)
        rows = (
            db.query(
                Profile.id,
                Profile.name,
                func.count(func.distinct(Order.id)),
                spent,
                func.sum(OrderItem.quantity),
            )
            .join(Order, Order.buyer_id == Profile.id)
            .join(OrderItem, OrderItem.order_id == Order.id)
            .group_by(Profile.id, Profile.name)
            .order_by(spent.desc(), Profile.id.asc())
            .limit(limit)
            .all()
        )
        return [
            {
                "buyer_id": buyer_id,
                "buyer_name": name,
                "total_orders": orders,
                "total_spent": round(total or 0.0, 2),
                "total_items_bought": int(quantity or 0),
            }
            for buyer_id, name, orders, total, quantity in rows
        ]

    @staticmethod
    def product_rankings(db: Session, limit: int = 10) -> list[dict]:
        revenue = func.sum(OrderItem.price * OrderItem.quantity)
        rows = (
            db.query(
                Product.id,
                Product.name,
                Category.name,
                func.count(OrderItem.id),
                func.sum(OrderItem.quantity),
                revenue,
            )
            .join(OrderItem, OrderItem.product_id == Product.id)
            .outerjoin(Category, Product.category_id == Category.id)
            .group_by(Product.id, Product.name, Category.name)
            .order_by(revenue.desc(), Product.id.asc())
            .limit(limit)
            .all()
        )
        return [
            {
                "product_id": product_id,
                "product_name": name,
                "category_name": category_name or UNCATEGORIZED,
                "times_sold": times_sold,
                "total_quantity_sold": int(quantity or 0),
                "total_revenue": round(total or 0.0, 2),
            }
            for product_id, name, category_name, times_sold, quantity, total in rows
        ]

    @staticmethod
    def category_rankings(db: Session, limit: int = 10) -> list[dict]:
        product_counts = dict(
            db.query(Product.category_id, func.count(Product.id))
            .filter(Product.category_id.isnot(None))
            .group_by(Product.category_id)
            .all()
        )

        revenue = func.sum(OrderItem.price * OrderItem.quantity)
        rows = (
            db.query(
                Category.id,
                Category.name,
                func.count(OrderItem.id),
                func.sum(OrderItem.quantity),
                revenue,
            )
            .join(Product, Product.category_id == Category.id)
            .join(OrderItem, OrderItem.product_id == Product.id)
            .group_by(Category.id, Category.name)
            .order_by(revenue.desc(), Category.id.asc())
            .limit(limit)
            .all()
        )
        return [
            {
                "category_id": category_id,
                "category_name": name,
                "total_products": product_counts.get(category_id, 0),
                "times_sold": times_sold,
                "total_quantity_sold": int(quantity or 0),
                "total_revenue": round(total or 0.0, 2),
            }
            for category_id, name, times_sold, quantity, total in rows
        ]

    @staticmethod
    def rankings(db: Session, limit: int = 10) -> dict:
        return {
            "sellers": AnalyticsService.seller_rankings(db, limit),
            "buyers": AnalyticsService.buyer_rankings(db, limit),
            "products": AnalyticsService.product_rankings(db, limit),
            "categories": AnalyticsService.category_rankings(db, limit),
        }
