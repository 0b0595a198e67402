"""리뷰 서비스"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from storefront.core.exceptions import (
    OrderNotFoundException,
    ReviewAlreadyExistsException,
    ReviewNotAllowedException,
)
from storefront.models import Order, OrderItem, Profile, Review
from storefront.services.order_service import REVIEWABLE_STATUSES

logger = logging.getLogger(__name__)


class ReviewService:
    """발송된 구매 항목에 대한 구매자 리뷰"""

    @staticmethod
    def submit_review(
        buyer: Profile,
        order_id: int,
        product_id: int,
        rating: int,
        db: Session,
        comment: Optional[str] = None,
    ) -> Review:
        """
        주문에서 받은 상품에 리뷰를 작성합니다.

        Args:
            buyer: 작성자
            order_id: 상품이 포함된 주문
            product_id: 리뷰 대상 상품
            rating: 1..5
            db: DB 세션
            comment: 리뷰 내용 (선택)

        Returns:
            생성된 Review

        Raises:
            OrderNotFoundException: 해당 주문에 구매자의 항목이 없는 경우
            ReviewNotAllowedException: 아직 발송되지 않은 항목
            ReviewAlreadyExistsException: 이미 리뷰한 항목
        """
        item = (
            db.query(OrderItem)
            .join(Order, OrderItem.order_id == Order.id)
            .filter(
                OrderItem.order_id == order_id,
                OrderItem.product_id == product_id,
                Order.buyer_id == buyer.id,
            )
            .first()
        )
        if item is None:
            raise OrderNotFoundException(order_id)

        if item.status not in REVIEWABLE_STATUSES:
            raise ReviewNotAllowedException(item.status)

        existing = (
            db.query(Review.id)
            .filter(Review.order_id == order_id, Review.product_id == product_id)
            .first()
        )
        if existing:
            raise ReviewAlreadyExistsException(order_id, product_id)

        review = Review(
            order_id=order_id,
            product_id=product_id,
            buyer_id=buyer.id,
            seller_id=item.product.seller_id,
            rating=rating,
            comment=comment or None,
        )
        db.add(review)
        db.commit()
        db.refresh(review)

        logger.info(
            "User %s reviewed product %s (order %s): %s stars",
            buyer.id,
            product_id,
            order_id,
            rating,
        )
        return review
