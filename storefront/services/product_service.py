"""상품 카탈로그 및 판매자 재고 관리 서비스"""

import logging
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from storefront.core.exceptions import (
    PermissionDeniedException,
    ProductInUseException,
    ProductNotFoundException,
)
from storefront.models import CartItem, OrderItem, Product, Profile, Review
from storefront.services.category_service import CategoryService

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 9

# (하한, 상한, 하한 포함, 상한 포함), None은 제한 없음
PRICE_RANGES = {
    "under_50": (None, 50, True, False),
    "50_100": (50, 100, True, True),
    "100_200": (100, 200, False, True),
    "over_200": (200, None, False, False),
}

UPDATABLE_FIELDS = ("name", "description", "price", "stock", "image_url", "category_id")


def escape_like(text: str) -> str:
    """
    사용자 입력의 LIKE 와일드카드(%, _)를 문자 그대로 매칭되도록 이스케이프합니다.

    Example:
        >>> escape_like("100%_off")
        '100\\\\%\\\\_off'
    """
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductService:
    """상품 조회, 상세 정보, 판매자 상품 관리"""

    @staticmethod
    def _apply_price_range(query, price_range: str):
        lower, upper, lower_inclusive, upper_inclusive = PRICE_RANGES[price_range]
        if lower is not None:
            query = query.filter(
                Product.price >= lower if lower_inclusive else Product.price > lower
            )
        if upper is not None:
            query = query.filter(
                Product.price <= upper if upper_inclusive else Product.price < upper
            )
        return query

    @staticmethod
    def search_products(
        db: Session,
        q: Optional[str] = None,
        category_id: Optional[int] = None,
        price_range: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        skip: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> dict:
        """
        카탈로그를 필터링하고 페이지 단위로 조회합니다.

        Args:
            db: DB 세션
            q: 상품명 또는 설명 검색어 (대소문자 무시)
            category_id: 해당 카테고리 상품만
            price_range: PRICE_RANGES 중 하나
            min_price: 최소 가격 (포함)
            max_price: 최대 가격 (포함)
            skip: 건너뛸 레코드 수 (페이지네이션)
            limit: 페이지 크기

        Returns:
            {
                "items": list[Product],
                "total": int,
                "has_more": bool
            }
        """
        query = db.query(Product)

        if q:
            pattern = f"%{escape_like(q.strip())}%"
            query = query.filter(
                or_(
                    Product.name.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )
        if category_id is not None:
            query = query.filter(Product.category_id == category_id)
        if price_range:
            query = ProductService._apply_price_range(query, price_range)
        if min_price is not None:
            query = query.filter(Product.price >= min_price)
        if max_price is not None:
            query = query.filter(Product.price <= max_price)

        total = query.count()
        items = query.order_by(Product.id.asc()).offset(skip).limit(limit).all()

        return {
            "items": items,
            "total": total,
            "has_more": skip + len(items) < total,
        }

    @staticmethod
    def get_product(product_id: int, db: Session) -> Optional[Product]:
        """
        ID로 상품을 조회합니다.

        Returns:
            Product 또는 None
        """
        return db.query(Product).filter(Product.id == product_id).first()

    @staticmethod
    def require_product(product_id: int, db: Session) -> Product:
        """
        Raises:
            ProductNotFoundException: 존재하지 않는 상품 ID
        """
        product = ProductService.get_product(product_id, db)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    def get_product_detail(product_id: int, db: Session) -> Optional[dict]:
        """
        상품 상세 페이지 데이터

        Returns:
            {
                "product": Product,
                "seller": Profile | None,
                "average_rating": float | None,
                "review_count": int
            }
            상품이 없으면 None
        """
        product = ProductService.get_product(product_id, db)
        if product is None:
            return None

        average, count = (
            db.query(func.avg(Review.rating), func.count(Review.id))
            .filter(Review.product_id == product_id)
            .one()
        )

        return {
            "product": product,
            "seller": product.seller,
            "average_rating": round(float(average), 2) if average is not None else None,
            "review_count": count,
        }

    @staticmethod
    def related_products(product_id: int, db: Session, limit: int = 4) -> list[Product]:
        """
        같은 카테고리의 다른 상품 (카테고리가 없으면 아무 다른 상품)

        Raises:
            ProductNotFoundException: 존재하지 않는 상품 ID
        """
        product = ProductService.require_product(product_id, db)

        query = db.query(Product).filter(Product.id != product.id)
        if product.category_id is not None:
            query = query.filter(Product.category_id == product.category_id)

        return query.order_by(Product.id.asc()).limit(limit).all()

    @staticmethod
    def product_reviews(product_id: int, db: Session) -> list[Review]:
        """
        상품 리뷰를 최신순으로 반환합니다.

        Raises:
            ProductNotFoundException: 존재하지 않는 상품 ID
        """
        ProductService.require_product(product_id, db)
        return (
            db.query(Review)
            .filter(Review.product_id == product_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
            .all()
        )

    @staticmethod
    def list_seller_products(seller_id: int, db: Session) -> list[Product]:
        return (
            db.query(Product)
            .filter(Product.seller_id == seller_id)
            .order_by(Product.id.asc())
            .all()
        )

    @staticmethod
    def create_product(
        name: str,
        price: float,
        stock: int,
        seller: Profile,
        db: Session,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> Product:
        """
        판매자 재고에 상품을 추가합니다.

        Args:
            name: 상품명
            price: 단가
            stock: 재고 수량
            seller: 소유 판매자 프로필
            db: DB 세션
            description: 설명 (선택)
            image_url: 이미지 URL (선택)
            category_id: 카테고리 (선택)

        Returns:
            생성된 Product

        Raises:
            CategoryNotFoundException: 존재하지 않는 카테고리
        """
        if category_id is not None:
            CategoryService.require_category(category_id, db)

        product = Product(
            name=name,
            description=description,
            price=price,
            stock=stock,
            image_url=image_url,
            category_id=category_id,
            seller_id=seller.id,
        )
        db.add(product)
        db.commit()
        db.refresh(product)

        logger.info("Seller %s created product %s", seller.id, product.id)
        return product

    @staticmethod
    def _require_owned(product_id: int, user: Profile, db: Session) -> Product:
        product = ProductService.require_product(product_id, db)
        if product.seller_id != user.id and not user.is_admin:
            raise PermissionDeniedException(
                f"Product {product_id} belongs to another seller"
            )
        return product

    @staticmethod
    def update_product(
        product_id: int, changes: dict, user: Profile, db: Session
    ) -> Product:
        """
        본인 소유 상품을 부분 수정합니다.

        Args:
            product_id: 상품 ID
            changes: 필드 -> 새 값, UPDATABLE_FIELDS만 반영
            user: 요청자 (소유 판매자 또는 관리자)
            db: DB 세션

        Raises:
            ProductNotFoundException: 존재하지 않는 상품
            PermissionDeniedException: 요청자가 상품 소유자가 아닌 경우
            CategoryNotFoundException: changes의 카테고리가 존재하지 않는 경우
        """
        product = ProductService._require_owned(product_id, user, db)

        if changes.get("category_id") is not None:
            CategoryService.require_category(changes["category_id"], db)

        for field, value in changes.items():
            if field in UPDATABLE_FIELDS:
                setattr(product, field, value)

        db.commit()
        db.refresh(product)

        return product

    @staticmethod
    def delete_product(product_id: int, user: Profile, db: Session) -> None:
        """
        본인 소유 상품을 삭제합니다.

        Raises:
            ProductNotFoundException: 존재하지 않는 상품
            PermissionDeniedException: 요청자가 상품 소유자가 아닌 경우
            ProductInUseException: 이미 주문에 포함된 상품
        """
        product = ProductService._require_owned(product_id, user, db)

        if db.query(OrderItem.id).filter(OrderItem.product_id == product_id).first():
            raise ProductInUseException(product_id)

        db.query(CartItem).filter(CartItem.product_id == product_id).delete(
            synchronize_session=False
        )
        db.delete(product)
        db.commit()

        logger.info("User %s deleted product %s", user.id, product_id)
